"""
Use case: List every book in the catalog.

Input: none
Output: Success carrying the books ordered by title
Side effects: None.
"""

import logging

from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.outcome import Outcome, Success
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)


class ListBooksUseCase:
    """Returns the whole catalog."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def execute(self) -> Outcome[list[Book]]:
        books = self._book_repo.list_all()
        logger.info("Listing %d books", len(books))
        return Success(books)
