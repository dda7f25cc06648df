"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping


@dataclass(frozen=True)
class Book:
    """A book in the catalog, identified by its ISBN."""

    isbn: str
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Book":
        """Build a Book from a payload that already passed validation.

        Keys that are not Book fields are ignored.

        Args:
            data: Validated key-value payload.

        Returns:
            The typed Book record.
        """
        return cls(**{f.name: data[f.name] for f in fields(cls)})

    def with_isbn(self, isbn: str) -> "Book":
        """Return a copy of this book under a different ISBN."""
        return Book(**{**asdict(self), "isbn": isbn})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


BOOK_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Book))
