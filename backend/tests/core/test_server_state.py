"""Tests for ServerState: atomic counter and fixed start instant."""

import threading
from unittest.mock import patch

from stress_api.core.server_state import ServerState


def test_counter_starts_at_zero():
    assert ServerState().request_count == 0


def test_increment_returns_new_total():
    state = ServerState()
    assert state.increment() == 1
    assert state.increment() == 2
    assert state.request_count == 2


def test_concurrent_increments_are_not_lost():
    state = ServerState()

    def hammer():
        for _ in range(1000):
            state.increment()

    threads = [threading.Thread(target=hammer) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert state.request_count == 8000


def test_uptime_is_floored_seconds():
    with patch("stress_api.core.server_state.time.monotonic", return_value=100.0):
        state = ServerState()
    with patch("stress_api.core.server_state.time.monotonic", return_value=102.9):
        assert state.uptime_seconds() == 2
