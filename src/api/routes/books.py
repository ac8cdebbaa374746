"""Book catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.api.schemas.books import (
    Book,
    BookCreate,
    BookDelete,
    ErrorResponse,
    MessageResponse,
)
from src.core.books.service import CatalogService

router = APIRouter(prefix="/api/books", tags=["Books"])


def get_catalog_service(request: Request) -> CatalogService:
    """Get the catalog service owned by the running application."""
    return request.app.state.catalog


@router.get("", response_model=list[Book])
async def list_books(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> list[Book]:
    """List every book in the catalog."""
    return service.list_books()


@router.post(
    "",
    response_model=Book,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
)
async def create_book(
    request: BookCreate,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> Book:
    """Add a book. The server assigns its id."""
    return service.create_book(request)


@router.put(
    "",
    response_model=Book,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_book(
    request: Book,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> Book:
    """Replace a book's title and author, matched by id."""
    return service.update_book(request)


@router.delete(
    "",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_book(
    request: BookDelete,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> MessageResponse:
    """Delete a book by id."""
    service.delete_book(request.id)
    return MessageResponse(message="Book deleted successfully")
