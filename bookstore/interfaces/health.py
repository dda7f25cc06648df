"""
Health check router.

Liveness/readiness check. Reports the application version and whether
the books database answers a trivial query. Always returns 200 so a
database outage is visible without the endpoint itself failing.
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from bookstore.core.config import settings
from bookstore.interfaces.catalog.dependencies import get_engine
from bookstore.interfaces.catalog.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _database_reachable(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check: books database unreachable", exc_info=True)
        return False
    return True


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version and database reachability.",
)
def health_check(engine: Engine = Depends(get_engine)) -> HealthResponse:
    if _database_reachable(engine):
        return HealthResponse(status="ok", version=settings.version, database="ok")
    return HealthResponse(
        status="degraded", version=settings.version, database="unavailable"
    )
