"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.core.books.service import create_catalog_service
from src.main import create_app


@pytest.fixture
def app():
    """Create an application with its own seeded catalog."""
    return create_app(Settings(seed_books=True))


@pytest.fixture
def client(app):
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service():
    """Catalog service over an empty store."""
    return create_catalog_service(seed=False)


@pytest.fixture
def new_book():
    """Payload for a book not in the sample data."""
    return {"title": "Dune", "author": "Frank Herbert"}
