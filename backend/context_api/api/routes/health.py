"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /health/ always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 if the item service is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness check. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "context-api"}


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness check: includes item service connectivity."""
    item_service_ok = await request.app.state.item_service.health_check()
    if not item_service_ok:
        logger.warning("Readiness check failed: item service unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "item_service_unavailable",
            },
        )
    return {"status": "ready", "checks": {"item_service": "healthy"}}
