"""
Errors for the catalog bounded context.

ApplicationError is the value carried by a failed Outcome and rendered
by the terminal error handler. The exception classes cover storage
conditions the adapters report to the use cases.
No framework imports allowed.
"""

from dataclasses import dataclass
from typing import Any, Union

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409

ErrorMessage = Union[str, list[str]]


@dataclass(frozen=True)
class ApplicationError:
    """A message (or list of messages) paired with an HTTP status.

    Purely a carrier: callers choose both the status and the content.
    """

    message: ErrorMessage
    status: int

    def to_dict(self) -> dict[str, Any]:
        message = list(self.message) if isinstance(self.message, list) else self.message
        return {"message": message, "status": self.status}


def book_not_found(isbn: str) -> ApplicationError:
    return ApplicationError(f"There is no book with an isbn '{isbn}'", HTTP_404)


def book_already_exists(isbn: str) -> ApplicationError:
    return ApplicationError(f"A book with isbn '{isbn}' already exists", HTTP_409)


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class DuplicateBookError(CatalogDomainError):
    """Raised when inserting a book whose ISBN is already stored."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Duplicate isbn: {isbn}")
        self.isbn = isbn
