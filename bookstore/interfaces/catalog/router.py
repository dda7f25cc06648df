"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Write endpoints pass the body through the request gate first.
Use cases return Outcomes; failures are rendered by the shared
error_response so every error has the same envelope.
"""

from typing import Callable, TypeVar

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from bookstore.application.catalog.create_book import CreateBookUseCase
from bookstore.application.catalog.delete_book import DeleteBookUseCase
from bookstore.application.catalog.dtos import (
    CreateBookCommand,
    DeleteBookCommand,
    GetBookQuery,
    UpdateBookCommand,
)
from bookstore.application.catalog.get_book import GetBookUseCase
from bookstore.application.catalog.list_books import ListBooksUseCase
from bookstore.application.catalog.update_book import UpdateBookUseCase
from bookstore.core.config import settings
from bookstore.domain.catalog.entities import Book
from bookstore.domain.catalog.outcome import Failure, Outcome
from bookstore.interfaces.catalog.dependencies import (
    get_create_book_use_case,
    get_delete_book_use_case,
    get_get_book_use_case,
    get_list_books_use_case,
    get_update_book_use_case,
)
from bookstore.interfaces.catalog.gate import book_payload_gate
from bookstore.interfaces.catalog.schemas import (
    BookListResponse,
    BookResponse,
    BookSchema,
    ErrorResponse,
    MessageResponse,
)
from bookstore.shared.errors.handlers import error_response
from bookstore.shared.security.rate_limiting import limiter

T = TypeVar("T")

router = APIRouter(prefix="/books", tags=["books"])


def _respond(
    outcome: Outcome[T],
    present: Callable[[T], BaseModel],
    status_code: int = 200,
) -> JSONResponse:
    if isinstance(outcome, Failure):
        return error_response(outcome.error)
    return JSONResponse(
        status_code=status_code,
        content=present(outcome.value).model_dump(mode="json"),
    )


def _present_book(book: Book) -> BookResponse:
    return BookResponse(book=BookSchema.from_entity(book))


def _present_books(books: list[Book]) -> BookListResponse:
    return BookListResponse(books=[BookSchema.from_entity(b) for b in books])


def _present_deleted(_isbn: str) -> MessageResponse:
    return MessageResponse(message="Book deleted")


@router.get(
    "",
    response_model=BookListResponse,
    summary="List books",
    description="Return every book in the catalog, ordered by title.",
)
def list_books(
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
) -> JSONResponse:
    return _respond(use_case.execute(), _present_books)


@router.get(
    "/{isbn}",
    response_model=BookResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a book",
)
def get_book(
    isbn: str,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
) -> JSONResponse:
    """Fetch one book by ISBN."""
    return _respond(use_case.execute(GetBookQuery(isbn=isbn)), _present_book)


@router.post(
    "",
    status_code=201,
    response_model=BookResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a book",
    description="Validate the body against the book schema and store it.",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    gate: Outcome[Book] = Depends(book_payload_gate),
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
) -> JSONResponse:
    """Create a book from a payload that passed the request gate."""
    outcome = gate.then(lambda book: use_case.execute(CreateBookCommand(book=book)))
    return _respond(outcome, _present_book, status_code=201)


@router.put(
    "/{isbn}",
    response_model=BookResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a book",
    description="Replace every field of the book stored under the path ISBN.",
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    isbn: str,
    gate: Outcome[Book] = Depends(book_payload_gate),
    use_case: UpdateBookUseCase = Depends(get_update_book_use_case),
) -> JSONResponse:
    """Update a book from a payload that passed the request gate."""
    outcome = gate.then(
        lambda book: use_case.execute(UpdateBookCommand(isbn=isbn, book=book))
    )
    return _respond(outcome, _present_book)


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a book",
)
def delete_book(
    isbn: str,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
) -> JSONResponse:
    return _respond(use_case.execute(DeleteBookCommand(isbn=isbn)), _present_deleted)
