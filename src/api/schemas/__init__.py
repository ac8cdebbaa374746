"""API schemas."""

from src.api.schemas.books import Book, BookCreate, BookDelete, ErrorResponse, MessageResponse

__all__ = ["Book", "BookCreate", "BookDelete", "ErrorResponse", "MessageResponse"]
