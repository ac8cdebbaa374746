"""Catalog API client and form/list state."""

from src.client.api import (
    CatalogClient,
    CatalogClientError,
    CatalogRequestError,
    CatalogTransportError,
)
from src.client.manager import BookForm, BookManager, Notification

__all__ = [
    "BookForm",
    "BookManager",
    "CatalogClient",
    "CatalogClientError",
    "CatalogRequestError",
    "CatalogTransportError",
    "Notification",
]
