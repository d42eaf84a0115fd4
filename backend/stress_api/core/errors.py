"""Error Hierarchy: typed exceptions for Stress Test API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the wire envelope: {"error": <message>, "timestamp": <epoch ms>}
    - log_extra() carries code, category (and subclass detail) into log records
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with StressApiError base: the global handler catches all
    - Simulated failures are raised, not returned, so they travel the same path
      as any real server error (handler, logging, status mapping)
"""

from enum import Enum

from stress_api.core.clock import epoch_ms


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    SIMULATED = "simulated"
    INTERNAL = "internal"


class StressApiError(Exception):
    """Base exception for all Stress Test API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = epoch_ms()

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "timestamp": self.timestamp}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {"error_code": self.code, "category": self.category.value}


class SimulatedServerError(StressApiError):
    """Deliberate failure drawn by GET /api/error."""
    def __init__(self, rate: float):
        super().__init__(
            "Simulated server error", "SIMULATED_ERROR", ErrorCategory.SIMULATED,
            ErrorSeverity.WARNING, 500,
        )
        self.rate = rate

    def log_extra(self) -> dict:
        return {**super().log_extra(), "rate": self.rate}
