"""In-memory book storage."""

import threading
from itertools import count
from typing import Iterable

from src.api.schemas.books import Book, BookCreate

# Books available when the store is created with seed data
SAMPLE_BOOKS = (
    BookCreate(title="The Great Gatsby", author="F. Scott Fitzgerald"),
    BookCreate(title="To Kill a Mockingbird", author="Harper Lee"),
)


class CatalogStore:
    """Simple in-memory store for book records.

    Records are kept in insertion order. Every scan-then-mutate sequence
    runs under a single lock, and ids come from a counter guarded by the
    same lock, so an id is never handed out twice.
    """

    def __init__(self, seed: Iterable[BookCreate] = ()) -> None:
        self._books: list[Book] = []
        self._ids = count(1)
        self._lock = threading.Lock()
        for entry in seed:
            self.add(entry)

    def add(self, entry: BookCreate) -> Book:
        """Assign an id to a new record and append it."""
        with self._lock:
            book = Book(id=str(next(self._ids)), title=entry.title, author=entry.author)
            self._books.append(book)
            return book.model_copy()

    def _find_index(self, book_id: str) -> int:
        """Position of the record with this id, or -1. Caller must hold the lock."""
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return -1

    def get(self, book_id: str) -> Book | None:
        """Get a book by ID."""
        with self._lock:
            index = self._find_index(book_id)
            return self._books[index].model_copy() if index != -1 else None

    def replace(self, book: Book) -> bool:
        """Replace the record sharing this book's id."""
        with self._lock:
            index = self._find_index(book.id)
            if index == -1:
                return False
            self._books[index] = book.model_copy()
            return True

    def remove(self, book_id: str) -> bool:
        """Remove the record with this id."""
        with self._lock:
            index = self._find_index(book_id)
            if index == -1:
                return False
            del self._books[index]
            return True

    def list_books(self) -> list[Book]:
        """Snapshot of all books in insertion order."""
        with self._lock:
            return [book.model_copy() for book in self._books]

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)
