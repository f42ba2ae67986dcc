"""
Health check endpoints for monitoring.

- /health, /health/live: liveness (always 200 while the process is up)
- /health/db: database connectivity
- /health/ready: readiness (all dependencies healthy)
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from gestion_reservas.api.deps import get_db_session

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "gestion-reservas"


async def _database_is_healthy(session: AsyncSession) -> bool:
    try:
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        return True
    except SQLAlchemyError as e:
        logger.error("Database health check failed", exc_info=e)
        return False


@router.get("/health")
async def health_check():
    """Basic liveness probe."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/live")
async def health_check_live():
    """Alias for /health."""
    return {"status": "ok", "service": SERVICE_NAME}


@router.get("/health/db")
async def health_check_db(session: AsyncSession = Depends(get_db_session)):
    """
    Database connectivity health check.

    Returns 503 Service Unavailable if the database is down.
    """
    if await _database_is_healthy(session):
        return {"status": "healthy", "component": "database"}
    return JSONResponse(
        status_code=503,
        content={
            "status": "unhealthy",
            "component": "database",
            "error": "Database connection failed",
        },
    )


@router.get("/health/ready")
async def health_check_ready(session: AsyncSession = Depends(get_db_session)):
    """Readiness probe: 503 until every dependency answers."""
    if await _database_is_healthy(session):
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=503,
        content={"status": "not_ready", "checks": {"database": "unhealthy"}},
    )
