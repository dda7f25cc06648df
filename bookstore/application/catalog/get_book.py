"""
Use case: Fetch a single book by ISBN.

Input: GetBookQuery (isbn)
Output: Success carrying the Book
Side effects: None.
Failure cases: 404 when no book has the ISBN.
"""

import logging

from bookstore.application.catalog.dtos import GetBookQuery
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.errors import book_not_found
from bookstore.domain.catalog.outcome import Failure, Outcome, Success
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)


class GetBookUseCase:
    """Looks up one book in the repository."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, query: GetBookQuery) -> Outcome[Book]:
        """Run the lookup.

        Args:
            query: The requested ISBN.

        Returns:
            Success with the book, or a 404 Failure.
        """
        book = self._book_repo.get(query.isbn)
        if book is None:
            logger.warning("Book not found: isbn=%s", query.isbn)
            return Failure(book_not_found(query.isbn))
        return Success(book)
