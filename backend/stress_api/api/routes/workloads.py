"""Workload Endpoints: fast, slow, echo, CPU-bound and random-data responses.

Invariants:
    - Numeric query values are read as raw strings: bad input falls back to the
      default, never a 4xx
    - /api/slow waits with asyncio.sleep (the event loop keeps serving)
    - /api/cpu-intensive is a sync def, so FastAPI runs it in the thread pool
    - Response n equals the clamped value that was actually computed
    - /api/echo only echoes bodies declared as JSON (application/json, */*+json)

Design Decisions:
    - Query(None) typed as str instead of int: FastAPI's int coercion would
      reject "abc" with a validation error
"""

import asyncio
import logging
import random
import time
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request

from stress_api.api.dependencies import get_rng
from stress_api.core.clock import epoch_ms
from stress_api.core.workloads import (
    DEFAULT_DELAY_MS, MAX_DELAY_MS,
    DEFAULT_FIBONACCI_N, MAX_FIBONACCI_N,
    DEFAULT_RANDOM_RECORDS, MAX_RANDOM_RECORDS,
    fibonacci, generate_records, parse_bounded_int,
)
from stress_api.schemas.responses import (
    EchoHeaders,
    EchoResponse,
    FibonacciResponse,
    MessageResponse,
    RandomDataResponse,
    RandomRecord,
    SlowResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["workloads"])


@router.get("/fast")
async def fast_response() -> MessageResponse:
    return MessageResponse(message="Fast response", timestamp=epoch_ms())


@router.get("/slow")
async def slow_response(delay: str | None = Query(None)) -> SlowResponse:
    """Respond after `delay` milliseconds (default 1000, capped at 5000)."""
    actual_delay = parse_bounded_int(delay, DEFAULT_DELAY_MS, MAX_DELAY_MS)
    logger.debug("Delaying response", extra={"delay_ms": actual_delay})
    await asyncio.sleep(actual_delay / 1000)
    return SlowResponse(
        message="Slow response", delay=actual_delay, timestamp=epoch_ms(),
    )


def _is_json(content_type: str | None) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


@router.post("/echo")
async def echo(request: Request, body: Any = Body(None)) -> EchoResponse:
    """Return the parsed JSON body verbatim with two request headers.

    Bodies sent without a JSON content type are not echoed (received is null).
    """
    content_type = request.headers.get("content-type")
    return EchoResponse(
        received=body if _is_json(content_type) else None,
        headers=EchoHeaders(
            content_type=content_type,
            user_agent=request.headers.get("user-agent"),
        ),
        timestamp=epoch_ms(),
    )


@router.get("/cpu-intensive")
def cpu_intensive(n: str | None = Query(None)) -> FibonacciResponse:
    """Compute fib(n) by naive recursion (default 30, capped at 40)."""
    clamped = parse_bounded_int(n, DEFAULT_FIBONACCI_N, MAX_FIBONACCI_N)

    start = time.perf_counter()
    result = fibonacci(clamped)
    duration_ms = int((time.perf_counter() - start) * 1000)

    logger.debug(
        f"fib({clamped}) took {duration_ms}ms", extra={"n": clamped},
    )
    return FibonacciResponse(
        n=clamped,
        result=result,
        computation_time=duration_ms,
        timestamp=epoch_ms(),
    )


@router.get("/random-data")
async def random_data(
    size: str | None = Query(None),
    rng: random.Random = Depends(get_rng),
) -> RandomDataResponse:
    """Generate `size` random records (default 10, capped at 1000)."""
    count = parse_bounded_int(size, DEFAULT_RANDOM_RECORDS, MAX_RANDOM_RECORDS)
    records = [RandomRecord(**r) for r in generate_records(count, rng)]
    return RandomDataResponse(
        count=len(records), data=records, timestamp=epoch_ms(),
    )
