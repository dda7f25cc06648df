"""
Pydantic schemas for catalog API responses.

Request bodies are validated by the request gate against the JSON
schema, not here; these models define the response contract.
No business logic belongs here.
"""

from typing import Union

from pydantic import BaseModel, Field

from bookstore.domain.catalog.entities import Book


class BookSchema(BaseModel):
    """A book as returned by the API."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    @classmethod
    def from_entity(cls, book: Book) -> "BookSchema":
        return cls(**book.to_dict())


class BookResponse(BaseModel):
    """Response schema for single-book endpoints."""

    book: BookSchema


class BookListResponse(BaseModel):
    """Response schema for the catalog listing."""

    books: list[BookSchema]


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Book deleted"])


class ErrorDetail(BaseModel):
    message: Union[list[str], str]
    status: int


class ErrorResponse(BaseModel):
    """Standard error envelope returned for every failure."""

    error: ErrorDetail
    message: Union[list[str], str]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str
