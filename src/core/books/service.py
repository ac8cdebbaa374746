"""Catalog operations over a book store."""

import structlog

from src.api.schemas.books import Book, BookCreate
from src.core.books.store import SAMPLE_BOOKS, CatalogStore

logger = structlog.get_logger(__name__)


class CatalogError(Exception):
    """Base class for catalog failures surfaced to callers."""


class BookNotFoundError(CatalogError, LookupError):
    """No book with the requested id exists."""

    def __init__(self, book_id: str) -> None:
        super().__init__("Book not found")
        self.book_id = book_id


class BookValidationError(CatalogError, ValueError):
    """A book payload failed the non-empty field checks."""


def _require_text(value: str, field: str) -> str:
    if not value or not value.strip():
        raise BookValidationError(f"{field.capitalize()} is required")
    return value


class CatalogService:
    """List, create, update and delete books held in a ``CatalogStore``."""

    def __init__(self, store: CatalogStore) -> None:
        self._store = store

    @property
    def store(self) -> CatalogStore:
        return self._store

    def list_books(self) -> list[Book]:
        """Return every book in insertion order."""
        return self._store.list_books()

    def create_book(self, entry: BookCreate) -> Book:
        """
        Add a book and return it with its assigned id.

        Raises:
            BookValidationError: If title or author is empty
        """
        self._validate(entry)
        book = self._store.add(entry)
        logger.info("Book created", book_id=book.id, title=book.title)
        return book

    def update_book(self, book: Book) -> Book:
        """
        Replace an existing book wholesale, keeping its id.

        Raises:
            BookValidationError: If title or author is empty
            BookNotFoundError: If no book has ``book.id``
        """
        self._validate(book)
        if not self._store.replace(book):
            logger.warning("Update rejected, book not found", book_id=book.id)
            raise BookNotFoundError(book.id)
        logger.info("Book updated", book_id=book.id)
        return book

    def delete_book(self, book_id: str) -> None:
        """
        Remove a book.

        Raises:
            BookNotFoundError: If no book has ``book_id``
        """
        if not self._store.remove(book_id):
            logger.warning("Delete rejected, book not found", book_id=book_id)
            raise BookNotFoundError(book_id)
        logger.info("Book deleted", book_id=book_id)

    @staticmethod
    def _validate(entry: BookCreate) -> None:
        try:
            _require_text(entry.title, "title")
            _require_text(entry.author, "author")
        except BookValidationError as e:
            logger.warning("Book rejected", reason=str(e))
            raise


def create_catalog_service(seed: bool = True) -> CatalogService:
    """Build a service over a fresh store, optionally holding the sample books."""
    return CatalogService(CatalogStore(SAMPLE_BOOKS if seed else ()))
