"""Health Probe: liveness endpoint for load balancers and monitors.

Invariants:
    - GET /health always returns 200 while the process is up
    - request_count includes the health request itself (counted by middleware first)
    - timestamp is ISO-8601, unlike every other endpoint
"""

from fastapi import APIRouter, Depends, status

from stress_api.api.dependencies import get_server_state
from stress_api.core.clock import iso_timestamp
from stress_api.core.server_state import ServerState
from stress_api.schemas.responses import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(
    state: ServerState = Depends(get_server_state),
) -> HealthResponse:
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        status="healthy",
        uptime=state.uptime_seconds(),
        request_count=state.request_count,
        timestamp=iso_timestamp(),
    )
