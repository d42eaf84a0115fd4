"""Workloads: pure computations behind the synthetic load endpoints.

Invariants:
    - Query parsing never raises: the leading number is read, anything without
      one (or a negative integer) yields the default
    - Clamp is min(value, maximum) applied after parsing
    - fibonacci() stays naive and exponential (the cost is the workload)
    - requests_per_second() returns the integer 0 when uptime is 0

Design Decisions:
    - Random source injectable (random.Random-compatible) so tests can pin draws
    - Pure functions, no IO: routes own the HTTP shape, this module owns the math
"""

import random
import re
import string
from typing import Any

MAX_DELAY_MS = 5000
DEFAULT_DELAY_MS = 1000

MAX_FIBONACCI_N = 40
DEFAULT_FIBONACCI_N = 30

MAX_RANDOM_RECORDS = 1000
DEFAULT_RANDOM_RECORDS = 10

DEFAULT_ERROR_RATE = 0.5

_BASE36_DIGITS = string.digits + string.ascii_lowercase
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


# ─── Query parsing ──────────────────────────────────────────────

def _leading(pattern: re.Pattern, raw: str | None) -> str | None:
    if raw is None:
        return None
    match = pattern.match(raw)
    return match.group(1) if match else None


def parse_bounded_int(raw: str | None, default: int, maximum: int) -> int:
    """Parse a non-negative integer query value and clamp it to maximum.

    The leading integer is read and the rest ignored ("12abc" -> 12,
    "1.5" -> 1). No leading digits, or a negative value, yields the default.
    """
    digits = _leading(_LEADING_INT, raw)
    if digits is None:
        return default
    value = int(digits)
    if value < 0:
        return default
    return min(value, maximum)


def parse_rate(raw: str | None, default: float = DEFAULT_ERROR_RATE) -> float:
    """Parse the leading float of a query value ("0.3x" -> 0.3). Unbounded."""
    number = _leading(_LEADING_FLOAT, raw)
    if number is None:
        return default
    return float(number)


# ─── CPU load ───────────────────────────────────────────────────

def fibonacci(n: int) -> int:
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


# ─── Random data ────────────────────────────────────────────────

def to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_records(size: int, rng: random.Random | None = None) -> list[dict[str, Any]]:
    """Build `size` records with 1-based ids and fresh random fields."""
    rng = rng or random.Random()
    return [
        {
            "id": index + 1,
            "value": rng.random(),
            "name": f"item-{to_base36(rng.getrandbits(32))}",
            "active": rng.random() > 0.5,
        }
        for index in range(size)
    ]


# ─── Metrics ────────────────────────────────────────────────────

def requests_per_second(request_count: int, uptime_seconds: int) -> float | int:
    if uptime_seconds <= 0:
        return 0
    return round(request_count / uptime_seconds, 2)


def should_fail(rate: float, rng: random.Random | None = None) -> bool:
    """One uniform draw in [0, 1); fails when the draw is below rate."""
    rng = rng or random.Random()
    return rng.random() < rate
