"""Metrics Endpoint: request throughput and process memory as JSON.

Invariants:
    - requestsPerSecond is round(count / uptime, 2), or the integer 0 when uptime is 0
    - memoryUsage reports byte counts of this process (rss, vms)
"""

from fastapi import APIRouter, Depends

from stress_api.api.dependencies import get_server_state
from stress_api.core.clock import epoch_ms
from stress_api.core.server_state import ServerState
from stress_api.core.workloads import requests_per_second
from stress_api.infrastructure.process_memory import memory_usage
from stress_api.schemas.responses import MemoryUsage, MetricsResponse

router = APIRouter(prefix="/api/metrics", tags=["metrics"])


@router.get("")
async def metrics(
    state: ServerState = Depends(get_server_state),
) -> MetricsResponse:
    count = state.request_count
    uptime = state.uptime_seconds()
    return MetricsResponse(
        request_count=count,
        uptime=uptime,
        requests_per_second=requests_per_second(count, uptime),
        memory_usage=MemoryUsage(**memory_usage()),
        timestamp=epoch_ms(),
    )
