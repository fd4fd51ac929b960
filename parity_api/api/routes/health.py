"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
"""

from fastapi import APIRouter, Depends, status

from parity_api.config import Settings, get_settings
from parity_api.schemas.health import HealthStatus

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK, response_model=HealthStatus)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthStatus(
        status="healthy",
        service=settings.service_name,
        version=settings.version,
        environment=settings.environment,
    )
