"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/test and GET /api/v1/health/ always return 200 if the process is up
    - GET /api/v1/health/ready returns 503 if database is unreachable
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from linkup.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])
ping_router = APIRouter(prefix="/api", tags=["health"])


@ping_router.get("/test")
async def ping():
    """Connectivity check used by the web client."""
    return {"message": "Love from the LinkUp server!"}


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "linkup-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
