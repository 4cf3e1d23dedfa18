"""Health Probes — liveness for the process, readiness for the store.

Invariants:
    - GET /api/v1/health/ answers 200 while the process runs
    - GET /api/v1/health/ready answers 503 until the session manager can run SELECT 1
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from invoicing.infrastructure import database

SERVICE_NAME = "invoicing-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    """Read the singleton at call time: it is created in the lifespan hook."""
    manager = database.db_manager
    database_ok = manager is not None and await manager.health_check()
    if database_ok:
        return {"status": "ready", "checks": {"database": "healthy"}}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "checks": {"database": "unavailable"}},
    )
