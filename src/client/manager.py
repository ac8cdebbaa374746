"""Catalog form and list state for interactive front-ends.

``BookManager`` keeps what a book list screen needs between user actions:
a cached copy of the catalog, the single book being edited (if any), the
form's field errors and a log of notifications. The cached list is thrown
away after every successful mutation and fetched again on next access.
Failures never retry and never touch the edit target, so the user can
resubmit as-is.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

import structlog
from pydantic import BaseModel, ValidationError, field_validator

from src.api.schemas.books import Book, BookCreate
from src.client.api import CatalogClient, CatalogClientError

logger = structlog.get_logger(__name__)


class BookForm(BaseModel):
    """Title and author as typed into the form."""

    title: str
    author: str

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("author")
    @classmethod
    def author_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Author is required")
        return value


@dataclass
class Notification:
    """A toast shown after a mutation attempt."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"


class BookManager:
    """Drives the book form and list against a ``CatalogClient``."""

    def __init__(self, client: CatalogClient) -> None:
        self._client = client
        self._books: list[Book] | None = None
        self.editing: Book | None = None
        self.load_error: str | None = None
        self.form_errors: dict[str, str] = {}
        self.notifications: list[Notification] = []

    @property
    def books(self) -> list[Book]:
        """Cached catalog, fetched on first access after invalidation."""
        if self._books is None:
            self.refresh()
        return list(self._books or [])

    @property
    def is_stale(self) -> bool:
        return self._books is None

    def refresh(self) -> None:
        """Fetch the catalog into the cache."""
        try:
            self._books = self._client.list_books()
            self.load_error = None
        except CatalogClientError as e:
            logger.error("Failed to load catalog", error=str(e))
            self.load_error = str(e)

    def invalidate(self) -> None:
        self._books = None

    def start_edit(self, book: Book) -> None:
        """Load a book into the form for editing."""
        self.editing = book
        self.form_errors = {}

    def cancel_edit(self) -> None:
        self.editing = None
        self.form_errors = {}

    def submit(self, title: str, author: str) -> bool:
        """
        Validate the form and add or update a book.

        Updates the book under edit when there is one, otherwise adds a new
        book. Returns True when the request succeeded.
        """
        try:
            form = BookForm(title=title, author=author)
        except ValidationError as e:
            self.form_errors = {
                str(err["loc"][0]): str(err["ctx"]["error"]) for err in e.errors()
            }
            return False
        self.form_errors = {}

        if self.editing is not None:
            book = Book(id=self.editing.id, title=form.title, author=form.author)
            return self._mutate(
                lambda: self._client.update_book(book),
                "Book updated successfully",
                clear_edit=True,
            )
        entry = BookCreate(title=form.title, author=form.author)
        return self._mutate(
            lambda: self._client.add_book(entry),
            "Book added successfully",
            clear_edit=True,
        )

    def delete(self, book_id: str) -> bool:
        """Delete a book. Returns True when the request succeeded."""
        return self._mutate(
            lambda: self._client.delete_book(book_id),
            "Book deleted successfully",
            clear_edit=False,
        )

    def _mutate(self, action: Callable[[], object], success: str, clear_edit: bool) -> bool:
        try:
            action()
        except CatalogClientError as e:
            self.notifications.append(Notification("Error", str(e), "destructive"))
            return False

        self.invalidate()
        self.notifications.append(Notification("Success", success))
        if clear_edit:
            self.editing = None
        return True
