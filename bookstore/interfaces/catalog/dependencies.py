"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the catalog context.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from bookstore.application.catalog.create_book import CreateBookUseCase
from bookstore.application.catalog.delete_book import DeleteBookUseCase
from bookstore.application.catalog.get_book import GetBookUseCase
from bookstore.application.catalog.list_books import ListBooksUseCase
from bookstore.application.catalog.update_book import UpdateBookUseCase
from bookstore.core.config import settings
from bookstore.domain.catalog.ports import BookRepository
from bookstore.infrastructure.catalog.book_repository import BookRepositoryAdapter


@lru_cache
def get_engine() -> Engine:
    """Build the SQLAlchemy engine from application settings, once."""
    return create_engine(settings.get_database_dsn(), pool_pre_ping=True)


def get_book_repository(engine: Engine = Depends(get_engine)) -> BookRepository:
    return BookRepositoryAdapter(engine=engine)


def get_list_books_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> ListBooksUseCase:
    """Build ListBooksUseCase with its infrastructure dependencies."""
    return ListBooksUseCase(book_repo=book_repo)


def get_get_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> GetBookUseCase:
    """Build GetBookUseCase with its infrastructure dependencies."""
    return GetBookUseCase(book_repo=book_repo)


def get_create_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> CreateBookUseCase:
    """Build CreateBookUseCase with its infrastructure dependencies."""
    return CreateBookUseCase(book_repo=book_repo)


def get_update_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> UpdateBookUseCase:
    """Build UpdateBookUseCase with its infrastructure dependencies."""
    return UpdateBookUseCase(book_repo=book_repo)


def get_delete_book_use_case(
    book_repo: BookRepository = Depends(get_book_repository),
) -> DeleteBookUseCase:
    """Build DeleteBookUseCase with its infrastructure dependencies."""
    return DeleteBookUseCase(book_repo=book_repo)
