"""Service Descriptor: GET / lists what this server exposes."""

from fastapi import APIRouter

from stress_api.config import get_settings
from stress_api.schemas.responses import ServiceDescriptor

router = APIRouter(tags=["service"])

ENDPOINTS = [
    "/health",
    "/api/fast",
    "/api/slow",
    "/api/echo",
    "/api/cpu-intensive",
    "/api/random-data",
    "/api/metrics",
    "/api/error",
]


@router.get("/")
async def service_descriptor() -> ServiceDescriptor:
    settings = get_settings()
    return ServiceDescriptor(
        name=settings.service_name,
        version=settings.service_version,
        endpoints=list(ENDPOINTS),
    )
