"""Stress Test API: FastAPI application entry point.

Invariants:
    - Every request passes the counting middleware before its route handler
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StressApiError → JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory owns a fresh ServerState; module-level `app` is the
      instance uvicorn serves
    - Lifespan over @app.on_event: logging configured once, startup/shutdown logged
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from stress_api.api.error_handlers import register_error_handlers
from stress_api.api.routes import fault_injection, health, metrics, service, workloads
from stress_api.config import get_settings
from stress_api.core.server_state import ServerState
from stress_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"API server running on port {settings.port}",
        extra={"port": settings.port},
    )
    logger.info(f"Health check: http://localhost:{settings.port}/health")
    yield
    logger.info(
        "API server shutting down",
        extra={"port": settings.port},
    )


def create_app(state: ServerState | None = None) -> FastAPI:
    """Build the application with its own request counter and start instant."""
    settings = get_settings()
    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.server_state = state or ServerState()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        request.app.state.server_state.increment()
        return await call_next(request)

    app.include_router(service.router)
    app.include_router(health.router)
    app.include_router(workloads.router)
    app.include_router(metrics.router)
    app.include_router(fault_injection.router)

    register_error_handlers(app)
    return app


app = create_app()
