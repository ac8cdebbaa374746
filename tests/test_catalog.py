"""Tests for the catalog store and service."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.api.schemas.books import Book, BookCreate
from src.core.books import (
    BookNotFoundError,
    BookValidationError,
    CatalogStore,
    create_catalog_service,
)
from src.core.books.store import SAMPLE_BOOKS


def test_store_seed_ids():
    """Test seeded books get sequential ids and the next id follows them."""
    store = CatalogStore(SAMPLE_BOOKS)
    assert [b.id for b in store.list_books()] == ["1", "2"]
    assert store.add(BookCreate(title="Dune", author="Frank Herbert")).id == "3"


def test_store_returns_copies():
    """Test mutating a returned record does not change the store."""
    store = CatalogStore(SAMPLE_BOOKS)
    book = store.list_books()[0]
    book.title = "Changed"
    assert store.get("1").title == "The Great Gatsby"


def test_store_replace_and_remove_missing():
    store = CatalogStore()
    assert not store.replace(Book(id="1", title="A", author="B"))
    assert not store.remove("1")
    assert len(store) == 0


def test_store_keeps_insertion_order():
    store = CatalogStore()
    for title in ["Zebra", "Apple", "Mango"]:
        store.add(BookCreate(title=title, author="Anon"))
    store.replace(Book(id="1", title="Aardvark", author="Anon"))
    assert [b.title for b in store.list_books()] == ["Aardvark", "Apple", "Mango"]


def test_create_then_list(service):
    before = {b.id for b in service.list_books()}
    book = service.create_book(BookCreate(title="A", author="B"))
    assert book.id and book.id not in before

    matches = [b for b in service.list_books() if b.id == book.id]
    assert matches == [Book(id=book.id, title="A", author="B")]


def test_update_round_trip(service):
    book = service.create_book(BookCreate(title="A", author="B"))
    service.update_book(Book(id=book.id, title="A2", author="B"))
    assert service.list_books() == [Book(id=book.id, title="A2", author="B")]


def test_update_unknown_id(service):
    service.create_book(BookCreate(title="A", author="B"))
    before = service.list_books()
    with pytest.raises(BookNotFoundError) as exc_info:
        service.update_book(Book(id="missing", title="X", author="Y"))
    assert str(exc_info.value) == "Book not found"
    assert exc_info.value.book_id == "missing"
    assert service.list_books() == before


def test_delete_removes_exactly_one(service):
    first = service.create_book(BookCreate(title="A", author="B"))
    second = service.create_book(BookCreate(title="C", author="D"))

    service.delete_book(first.id)
    assert service.list_books() == [second]

    with pytest.raises(BookNotFoundError):
        service.delete_book(first.id)


@pytest.mark.parametrize(
    "title, author, message",
    [
        ("", "B", "Title is required"),
        ("  ", "B", "Title is required"),
        ("A", "", "Author is required"),
    ],
)
def test_create_rejects_empty_fields(service, title, author, message):
    with pytest.raises(BookValidationError, match=message):
        service.create_book(BookCreate(title=title, author=author))
    assert service.list_books() == []


def test_concurrent_creates_get_distinct_ids():
    """Test parallel creates all land with unique ids."""
    service = create_catalog_service(seed=False)
    count = 200

    with ThreadPoolExecutor(max_workers=16) as pool:
        books = list(
            pool.map(
                lambda i: service.create_book(BookCreate(title=f"Book {i}", author="Anon")),
                range(count),
            )
        )

    ids = {b.id for b in books}
    assert len(ids) == count
    assert {b.id for b in service.list_books()} == ids
