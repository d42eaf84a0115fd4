"""Server State: the only mutable state shared across requests.

Invariants:
    - request_count starts at 0, only ever incremented by 1, never reset
    - Start instant (monotonic) captured once at construction, immutable afterwards
    - increment() is serialized: concurrent handlers never lose an update
    - uptime_seconds() is floor(elapsed), measured on the monotonic clock

Design Decisions:
    - One instance per application (created by create_app, stored on app.state)
      instead of module globals, so each test app starts from zero
    - Lock over itertools.count tricks: sync handlers run in the thread pool
"""

import threading
import time


class ServerState:
    """Request counter and start instant for one running application."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._request_count = 0
        self._started_monotonic = time.monotonic()

    @property
    def request_count(self) -> int:
        with self._lock:
            return self._request_count

    def increment(self) -> int:
        """Count one inbound request. Returns the new total."""
        with self._lock:
            self._request_count += 1
            return self._request_count

    def uptime_seconds(self) -> int:
        return int(time.monotonic() - self._started_monotonic)
