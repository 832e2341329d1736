"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
    - Redis down degrades readiness to "degraded" but stays 200: the team cache is optional

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from soccer_manager.infrastructure import database
from soccer_manager.infrastructure.redis_client import redis_health_check

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "soccer-manager-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database required, cache reported."""
    db_ok = await database.db_manager.health_check() if database.db_manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    cache_ok = await redis_health_check()
    if not cache_ok:
        logger.warning("Readiness: team cache unavailable")
    return {
        "status": "ready" if cache_ok else "degraded",
        "checks": {
            "database": "healthy",
            "cache": "healthy" if cache_ok else "unavailable",
        },
    }
