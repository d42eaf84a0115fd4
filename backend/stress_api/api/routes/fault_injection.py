"""Fault Injection: GET /api/error fails with probability `rate`.

Invariants:
    - Exactly one uniform draw per request; draw < rate → 500, else 200
    - rate is unbounded: <= 0 never fails, >= 1 always fails
    - Invalid rate falls back to 0.5, never a 4xx

Design Decisions:
    - Failure raised as SimulatedServerError and rendered by the global handler
"""

import random

from fastapi import APIRouter, Depends, Query

from stress_api.api.dependencies import get_rng
from stress_api.core.clock import epoch_ms
from stress_api.core.errors import SimulatedServerError
from stress_api.core.workloads import parse_rate, should_fail
from stress_api.schemas.responses import MessageResponse, SimulatedErrorResponse

router = APIRouter(prefix="/api/error", tags=["fault-injection"])


@router.get("", responses={500: {"model": SimulatedErrorResponse}})
async def simulated_error(
    rate: str | None = Query(None),
    rng: random.Random = Depends(get_rng),
) -> MessageResponse:
    error_rate = parse_rate(rate)
    if should_fail(error_rate, rng):
        raise SimulatedServerError(error_rate)
    return MessageResponse(message="Success", timestamp=epoch_ms())
