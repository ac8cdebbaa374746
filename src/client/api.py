"""HTTP client for the book catalog API."""

from typing import Any

import httpx
import structlog

from src.api.schemas.books import Book, BookCreate
from src.config import get_settings

logger = structlog.get_logger(__name__)

BOOKS_PATH = "/api/books"


class CatalogClientError(Exception):
    """Base class for client-side catalog failures."""


class CatalogRequestError(CatalogClientError):
    """The API answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class CatalogTransportError(CatalogClientError):
    """The request never produced a usable response (network or JSON failure)."""


class CatalogClient:
    """Client for the catalog's list, add, update and delete endpoints."""

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http_client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                timeout=get_settings().client_timeout,
            )
        self._client = http_client

    def list_books(self) -> list[Book]:
        """Fetch every book in the catalog."""
        data = self._send("GET", None, "Failed to fetch books")
        return [Book.model_validate(item) for item in data]

    def add_book(self, entry: BookCreate) -> Book:
        """Create a book and return it with its server-assigned id."""
        data = self._send("POST", entry.model_dump(), "Failed to add book")
        return Book.model_validate(data)

    def update_book(self, book: Book) -> Book:
        """Replace a book wholesale."""
        data = self._send("PUT", book.model_dump(), "Failed to update book")
        return Book.model_validate(data)

    def delete_book(self, book_id: str) -> None:
        """Delete a book by id."""
        self._send("DELETE", {"id": book_id}, "Failed to delete book")

    def _send(self, method: str, payload: dict | None, failure: str) -> Any:
        try:
            response = self._client.request(method, BOOKS_PATH, json=payload)
        except httpx.HTTPError as e:
            logger.error("Catalog request failed", method=method, error=str(e))
            raise CatalogTransportError(str(e)) from e

        if not response.is_success:
            logger.warning(
                "Catalog request rejected",
                method=method,
                status_code=response.status_code,
            )
            raise CatalogRequestError(failure, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("Catalog response was not JSON", method=method, error=str(e))
            raise CatalogTransportError(str(e)) from e

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
