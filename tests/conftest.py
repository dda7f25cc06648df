"""
Shared fixtures.

The PostgreSQL engine is replaced by an in-memory SQLite engine through
FastAPI dependency overrides; no external database is needed.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from bookstore.domain.catalog.entities import Book
from bookstore.infrastructure.catalog.book_repository import BookRepositoryAdapter
from bookstore.interfaces.catalog.dependencies import get_engine
from bookstore.main import app
from bookstore.shared.security.rate_limiting import limiter


@pytest.fixture
def engine() -> Engine:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BookRepositoryAdapter(engine=engine).ensure_table()
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> BookRepositoryAdapter:
    return BookRepositoryAdapter(engine=engine)


@pytest.fixture
def test_book(repository: BookRepositoryAdapter) -> Book:
    """A stored book, present before each API test."""
    return repository.add(
        Book(
            isbn="12",
            amazon_url="http://a.co/eobPtX2",
            author="test author",
            language="english",
            pages=300,
            publisher="test publisher",
            title="test book",
            year=2020,
        )
    )


@pytest.fixture
def client(engine: Engine) -> TestClient:
    app.dependency_overrides[get_engine] = lambda: engine
    limiter.enabled = False
    yield TestClient(app)
    app.dependency_overrides.clear()
    limiter.enabled = True
