"""Root conftest: shared fixtures: a fresh app and an async HTTP client per test.

Invariants:
    - Every test gets its own create_app() instance, so request counters start at 0
    - Requests go through ASGITransport (no socket, no lifespan)
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Human-readable logs in test output
os.environ.setdefault("LOG_FORMAT", "text")

from stress_api.main import create_app  # noqa: E402


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
