"""Health & Readiness Probes: liveness and readiness endpoints.

Invariants:
    - GET {prefix}/health/ always returns 200 if the process is up (liveness)
    - GET {prefix}/health/ready returns a 503 error envelope if the database
      is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.core import envelope
from app.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{get_settings().api_prefix}/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return envelope.success(
        {"status": "healthy", "service": "waste-catalog-api"},
    )


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe, includes database connectivity."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=envelope.error(
                "Database unavailable",
                status.HTTP_503_SERVICE_UNAVAILABLE,
                {"path": request.url.path},
            ),
        )
    return envelope.success({"status": "ready", "checks": {"database": "healthy"}})
