"""Book catalog schemas."""

from pydantic import BaseModel, Field


class BookCreate(BaseModel):
    """Request to add a book to the catalog."""
    title: str = Field(description="Book title")
    author: str = Field(description="Book author")


class Book(BookCreate):
    """A book record in the catalog."""
    id: str = Field(description="Unique book identifier, assigned by the server")


class BookDelete(BaseModel):
    """Request to remove a book from the catalog."""
    id: str = Field(description="Identifier of the book to delete")


class MessageResponse(BaseModel):
    """Acknowledgment of a successful operation."""
    message: str


class ErrorResponse(BaseModel):
    """Error body returned for failed catalog operations."""
    error: str
