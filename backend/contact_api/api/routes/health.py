"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /health always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable or the service
      has not been started (readiness)
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

SERVICE_NAME = "contact-geo-api"
SERVICE_VERSION = "1.0.0"

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness check, includes database connectivity."""
    service = getattr(request.app.state, "contact_service", None)
    if service is None or not await service.db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
