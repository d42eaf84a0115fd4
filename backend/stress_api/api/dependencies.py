"""Route Dependencies: per-application state and randomness for handlers.

Invariants:
    - get_server_state returns the ServerState owned by the app serving the request
    - get_rng yields a random.Random-compatible source; tests override it

Design Decisions:
    - State reached through request.app, never a module global: two apps in one
      process (tests) keep separate counters
"""

import random

from fastapi import Request

from stress_api.core.server_state import ServerState


def get_server_state(request: Request) -> ServerState:
    return request.app.state.server_state


def get_rng() -> random.Random:
    return random.Random()
