"""
Request gate for endpoints that create or replace a book.

Validates the raw JSON body against BOOK_SCHEMA before any use case
runs. PASS yields the typed Book; REJECT yields a 400 ApplicationError
listing every violation, and the use case is never invoked.
"""

import logging
from typing import Any

from fastapi import Body

from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.errors import HTTP_400, ApplicationError
from bookstore.domain.catalog.outcome import Failure, Outcome, Success
from bookstore.domain.catalog.schema import BOOK_SCHEMA
from bookstore.domain.catalog.validation import validate

logger = logging.getLogger(__name__)


def gate_book_payload(payload: Any, schema: dict = BOOK_SCHEMA) -> Outcome[Book]:
    """Decide PASS or REJECT for a book payload.

    Args:
        payload: Decoded request body, untyped.
        schema: JSON schema the body must satisfy.

    Returns:
        Success with the typed Book, or a 400 Failure carrying the
        ordered violation messages.
    """
    result = validate(payload, schema)
    if not result.valid:
        logger.warning("Book payload rejected: %d violation(s)", len(result.errors))
        return Failure(ApplicationError(result.messages, HTTP_400))
    return Success(Book.from_mapping(payload))


def book_payload_gate(payload: Any = Body(...)) -> Outcome[Book]:
    """FastAPI dependency running the gate on the request body."""
    return gate_book_payload(payload, BOOK_SCHEMA)
