"""
Centralized error handlers for FastAPI.

Terminal error-reporting stage. Every failure is rendered with the
same envelope:

    {"error": {"message": ..., "status": ...}, "message": ...}

Expected failures reach it as ApplicationError values through
error_response(); framework errors and exceptions reach it through
the handlers registered here.
No stack traces or internal details are exposed to clients.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.domain.catalog.errors import HTTP_400, ApplicationError, CatalogDomainError
from bookstore.shared.security.headers import apply_secure_headers

logger = logging.getLogger(__name__)

HTTP_429 = 429
HTTP_500 = 500

INTERNAL_ERROR = "Internal server error"


def error_response(error: ApplicationError) -> JSONResponse:
    """Serialize an ApplicationError into the standard error envelope."""
    body = error.to_dict()
    return JSONResponse(
        status_code=error.status,
        content={"error": body, "message": body["message"]},
    )


def _describe_request_error(error: dict[str, Any]) -> str:
    loc = tuple(error.get("loc", ()))
    if error.get("type") == "json_invalid":
        return "request body is not valid JSON"
    if error.get("type") == "missing" and loc == ("body",):
        return "request body is required"
    location = ".".join(str(part) for part in loc)
    return f"{location} {error.get('msg', 'is invalid')}".strip()


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle bodies FastAPI could not decode (malformed or absent JSON)."""
        messages = [_describe_request_error(err) for err in exc.errors()]
        logger.warning("Malformed request rejected: %d problem(s)", len(messages))
        return error_response(ApplicationError(messages, HTTP_400))

    @app.exception_handler(RateLimitExceeded)
    async def handle_rate_limit(
        _request: Request, exc: RateLimitExceeded
    ) -> JSONResponse:
        """Handle rate limit exceeded errors."""
        logger.warning("Rate limit exceeded: %s", exc.detail)
        return error_response(
            ApplicationError(f"Rate limit exceeded: {exc.detail}", HTTP_429)
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing errors: unknown paths, unsupported methods."""
        response = error_response(ApplicationError(str(exc.detail), exc.status_code))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for catalog domain errors no use case converted."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return error_response(ApplicationError(INTERNAL_ERROR, HTTP_500))

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return apply_secure_headers(
            error_response(ApplicationError(INTERNAL_ERROR, HTTP_500))
        )
