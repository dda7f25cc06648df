"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, catalog)
- Error handlers (single terminal error-reporting stage)
- Security middleware (headers, rate limiting)
- Logging configuration
- Books table creation on startup

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from bookstore.core.config import settings
from bookstore.infrastructure.catalog.book_repository import BookRepositoryAdapter
from bookstore.interfaces.catalog.dependencies import get_engine
from bookstore.interfaces.catalog.router import router as catalog_router
from bookstore.interfaces.health import router as health_router
from bookstore.shared.errors.handlers import register_error_handlers
from bookstore.shared.logging import configure_logging
from bookstore.shared.security.headers import SecurityHeadersMiddleware
from bookstore.shared.security.rate_limiting import limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: make sure the books table exists."""
    engine = app.dependency_overrides.get(get_engine, get_engine)()

    if settings.create_tables_on_startup:
        try:
            BookRepositoryAdapter(engine=engine).ensure_table()
        except SQLAlchemyError:
            logger.warning(
                "Books table could not be created at startup. "
                "Requests will fail until the database is reachable.",
                exc_info=True,
            )

    yield

    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(catalog_router)

    return app


app = create_app()
