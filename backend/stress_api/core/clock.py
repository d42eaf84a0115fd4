"""Clock: timestamp formats used in response bodies."""

import time
from datetime import datetime, timezone


def epoch_ms() -> int:
    """Current wall-clock time in whole epoch milliseconds."""
    return time.time_ns() // 1_000_000


def iso_timestamp(moment: datetime | None = None) -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    moment = moment or datetime.now(timezone.utc)
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")
