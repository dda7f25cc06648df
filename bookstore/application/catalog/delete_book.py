"""
Use case: Remove a book from the catalog.

Input: DeleteBookCommand (isbn)
Output: Success carrying the deleted ISBN
Side effects: Deletes one row of the books table.
Failure cases: 404 when no book has the ISBN.
"""

import logging

from bookstore.application.catalog.dtos import DeleteBookCommand
from bookstore.domain.catalog.errors import book_not_found
from bookstore.domain.catalog.outcome import Failure, Outcome, Success
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)


class DeleteBookUseCase:
    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self, command: DeleteBookCommand) -> Outcome[str]:
        logger.info("Deleting book isbn=%s", command.isbn)
        if not self._book_repo.delete(command.isbn):
            logger.warning("Book not found: isbn=%s", command.isbn)
            return Failure(book_not_found(command.isbn))
        return Success(command.isbn)
