"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - uptime measured from app.state.started_at (set once by create_app)
"""

from fastapi import APIRouter, Request, status

from calculator_api.core.health_status import build_health_status
from calculator_api.schemas.health import HealthResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    return build_health_status(request.app.state.started_at)
