"""
Use case: Replace a stored book.

Input: UpdateBookCommand (path isbn, validated Book)
Output: Success carrying the updated Book
Side effects: Updates one row of the books table.
Failure cases: 404 when no book has the ISBN.
"""

import logging

from bookstore.application.catalog.dtos import UpdateBookCommand
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.errors import book_not_found
from bookstore.domain.catalog.outcome import Failure, Outcome, Success
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)


class UpdateBookUseCase:
    """Overwrites every field of an existing book except its ISBN."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: UpdateBookCommand) -> Outcome[Book]:
        """Run the update use case.

        Args:
            command: The target ISBN and the replacement record.

        Returns:
            Success with the updated book, or a 404 Failure.
        """
        logger.info("Updating book isbn=%s", command.isbn)
        book = self._book_repo.update(command.isbn, command.book)
        if book is None:
            logger.warning("Book not found: isbn=%s", command.isbn)
            return Failure(book_not_found(command.isbn))
        return Success(book)
