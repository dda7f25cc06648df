"""
Adapter: Book repository.

Implements BookRepository port.
Reads and writes the books table through a SQLAlchemy engine.
Plain SQL only, so the same adapter runs on PostgreSQL and SQLite.
"""

import logging
from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from bookstore.domain.catalog.entities import BOOK_FIELDS, Book
from bookstore.domain.catalog.errors import DuplicateBookError
from bookstore.domain.catalog.ports import BookRepository

logger = logging.getLogger(__name__)

_COLUMNS = ", ".join(BOOK_FIELDS)

CREATE_BOOKS_TABLE = """
CREATE TABLE IF NOT EXISTS books (
    isbn TEXT PRIMARY KEY,
    amazon_url TEXT,
    author TEXT,
    language TEXT,
    pages INTEGER,
    publisher TEXT,
    title TEXT,
    year INTEGER
)
"""


def _row_to_book(row: Any) -> Book:
    return Book(**dict(row._mapping))


class BookRepositoryAdapter(BookRepository):
    """Persists books in a relational database.

    Implements the BookRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def ensure_table(self) -> None:
        """Create the books table if it does not exist yet."""
        with self._engine.begin() as conn:
            conn.execute(text(CREATE_BOOKS_TABLE))
        logger.info("Books table ready.")

    def list_all(self) -> list[Book]:
        query = text(f"SELECT {_COLUMNS} FROM books ORDER BY title")
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_book(row) for row in rows]

    def get(self, isbn: str) -> Optional[Book]:
        with self._engine.connect() as conn:
            return self._select_one(conn, isbn)

    def add(self, book: Book) -> Book:
        """Insert a book.

        Args:
            book: The record to insert.

        Returns:
            The stored record.

        Raises:
            DuplicateBookError: If the ISBN is already stored.
        """
        query = text(
            f"""
            INSERT INTO books ({_COLUMNS})
            VALUES (:isbn, :amazon_url, :author, :language,
                    :pages, :publisher, :title, :year)
            """
        )
        try:
            with self._engine.begin() as conn:
                conn.execute(query, book.to_dict())
                stored = self._select_one(conn, book.isbn)
        except IntegrityError as exc:
            raise DuplicateBookError(book.isbn) from exc
        return stored

    def update(self, isbn: str, book: Book) -> Optional[Book]:
        """Overwrite every column except the ISBN.

        Args:
            isbn: ISBN of the row to update.
            book: Replacement values; ``book.isbn`` is ignored.

        Returns:
            The stored record, or None if no row matched.
        """
        query = text(
            """
            UPDATE books
            SET amazon_url = :amazon_url,
                author = :author,
                language = :language,
                pages = :pages,
                publisher = :publisher,
                title = :title,
                year = :year
            WHERE isbn = :isbn
            """
        )
        with self._engine.begin() as conn:
            result = conn.execute(query, book.with_isbn(isbn).to_dict())
            if result.rowcount == 0:
                return None
            return self._select_one(conn, isbn)

    def delete(self, isbn: str) -> bool:
        query = text("DELETE FROM books WHERE isbn = :isbn")
        with self._engine.begin() as conn:
            result = conn.execute(query, {"isbn": isbn})
        return result.rowcount > 0

    @staticmethod
    def _select_one(conn: Connection, isbn: str) -> Optional[Book]:
        query = text(f"SELECT {_COLUMNS} FROM books WHERE isbn = :isbn")
        row = conn.execute(query, {"isbn": isbn}).fetchone()
        return _row_to_book(row) if row is not None else None
