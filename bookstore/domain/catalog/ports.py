"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from bookstore.domain.catalog.entities import Book


class BookRepository(ABC):
    """Port for persisting and retrieving books."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book, ordered by title."""
        raise NotImplementedError

    @abstractmethod
    def get(self, isbn: str) -> Optional[Book]:
        """Return the book with this ISBN, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def add(self, book: Book) -> Book:
        """Persist a new book and return the stored record.

        Raises:
            DuplicateBookError: If a book with the same ISBN exists.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, isbn: str, book: Book) -> Optional[Book]:
        """Replace the fields of the book stored under ``isbn``.

        Returns:
            The stored record, or None if no book has this ISBN.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, isbn: str) -> bool:
        """Delete a book. Returns False if no book has this ISBN."""
        raise NotImplementedError
