"""Response Schemas: immutable records returned by every endpoint.

Invariants:
    - Models are frozen: a response is built once and never mutated
    - timestamp is epoch milliseconds everywhere except HealthResponse (ISO-8601)
    - MetricsResponse.requests_per_second keeps the integer 0 as an integer

Design Decisions:
    - alias_generator=to_camel: FastAPI serializes by alias, routes stay snake_case
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True,
    )


class ServiceDescriptor(ApiModel):
    """GET /: static service description."""
    name: str
    version: str
    endpoints: list[str]


class HealthResponse(ApiModel):
    status: str = "healthy"
    uptime: int = Field(ge=0)
    request_count: int = Field(ge=0)
    timestamp: str


class MessageResponse(ApiModel):
    """Plain message + timestamp (fast response, simulated success)."""
    message: str
    timestamp: int


class SlowResponse(ApiModel):
    message: str = "Slow response"
    delay: int = Field(ge=0)
    timestamp: int


class EchoHeaders(ApiModel):
    content_type: str | None = None
    user_agent: str | None = None


class EchoResponse(ApiModel):
    received: Any = None
    headers: EchoHeaders
    timestamp: int


class FibonacciResponse(ApiModel):
    n: int
    result: int
    computation_time: int = Field(ge=0, description="milliseconds")
    timestamp: int


class RandomRecord(ApiModel):
    id: int
    value: float = Field(ge=0, lt=1)
    name: str
    active: bool


class RandomDataResponse(ApiModel):
    count: int
    data: list[RandomRecord]
    timestamp: int


class MemoryUsage(ApiModel):
    rss: int
    vms: int
    heap: int | None = None


class MetricsResponse(ApiModel):
    request_count: int
    uptime: int
    requests_per_second: int | float
    memory_usage: MemoryUsage
    timestamp: int


class SimulatedErrorResponse(ApiModel):
    """Body of the 500 returned by GET /api/error (documentation only)."""
    error: str
    timestamp: int
