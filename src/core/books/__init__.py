"""Book catalog module."""

from src.core.books.service import (
    BookNotFoundError,
    BookValidationError,
    CatalogError,
    CatalogService,
    create_catalog_service,
)
from src.core.books.store import CatalogStore

__all__ = [
    "BookNotFoundError",
    "BookValidationError",
    "CatalogError",
    "CatalogService",
    "CatalogStore",
    "create_catalog_service",
]
