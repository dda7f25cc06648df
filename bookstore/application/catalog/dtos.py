"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from bookstore.domain.catalog.entities import Book


@dataclass(frozen=True)
class GetBookQuery:
    """Input DTO for fetching a single book.

    Attributes:
        isbn: ISBN of the requested book.
    """

    isbn: str


@dataclass(frozen=True)
class CreateBookCommand:
    """Input DTO for adding a book to the catalog.

    Attributes:
        book: Validated book record.
    """

    book: Book


@dataclass(frozen=True)
class UpdateBookCommand:
    """Input DTO for replacing a stored book.

    Attributes:
        isbn: ISBN from the request path; identifies the stored row.
        book: Validated replacement record. Its own isbn is ignored.
    """

    isbn: str
    book: Book


@dataclass(frozen=True)
class DeleteBookCommand:
    """Input DTO for removing a book.

    Attributes:
        isbn: ISBN of the book to delete.
    """

    isbn: str
