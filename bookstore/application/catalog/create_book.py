"""
Use case: Add a book to the catalog.

Input: CreateBookCommand (validated Book)
Output: Success carrying the stored Book
Side effects: Inserts a row into the books table.
Failure cases: 409 when the ISBN is already stored.
"""

import logging

from bookstore.application.catalog.dtos import CreateBookCommand
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.errors import DuplicateBookError, book_already_exists
from bookstore.domain.catalog.outcome import Failure, Outcome, Success
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)


class CreateBookUseCase:
    """Persists a new book.

    The payload has already passed the request gate, so the command
    always carries a well-formed Book.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: CreateBookCommand) -> Outcome[Book]:
        """Run the create use case.

        Args:
            command: The book to insert.

        Returns:
            Success with the stored book, or a 409 Failure.
        """
        logger.info("Creating book isbn=%s", command.book.isbn)
        try:
            book = self._book_repo.add(command.book)
        except DuplicateBookError as exc:
            logger.warning("Duplicate isbn rejected: %s", exc.isbn)
            return Failure(book_already_exists(exc.isbn))
        return Success(book)
