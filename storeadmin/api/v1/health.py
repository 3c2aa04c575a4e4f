"""Health check endpoints."""

from typing import Any

from fastapi import APIRouter
from sqlalchemy import text

from storeadmin.core.config import settings
from storeadmin.core.deps import DBSession, RedisClient
from storeadmin.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(db: DBSession, redis: RedisClient) -> HealthResponse:
    """
    Health check endpoint.

    Checks database and Redis connectivity and returns service status.
    """
    health_status: dict[str, Any] = {
        "status": "healthy",
        "version": settings.version,
        "environment": settings.environment,
        "checks": {},
    }

    try:
        await db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = "healthy"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["checks"]["database"] = f"unhealthy: {str(e)}"

    try:
        await redis.ping()
        health_status["checks"]["redis"] = "healthy"
    except Exception as e:
        health_status["status"] = "unhealthy"
        health_status["checks"]["redis"] = f"unhealthy: {str(e)}"

    return HealthResponse(**health_status)


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """Liveness check: the process is up."""
    return {"status": "alive"}


@router.get("/health/ready")
async def readiness_check(db: DBSession) -> dict[str, str]:
    """Readiness check: the database answers."""
    await db.execute(text("SELECT 1"))
    return {"status": "ready"}
