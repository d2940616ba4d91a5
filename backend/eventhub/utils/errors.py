"""
Error types and formatting utilities.

Consistent error formatting for API responses and logs.

Functions:
- format_api_error(exception): Convert to API error response body
- format_log_error(exception): Convert to structured log entry
"""

from typing import Any


class EventhubError(Exception):
    """Base exception for errors that map onto an HTTP response."""

    message = "Internal server error"
    status_code = 500

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class EventNotFoundError(EventhubError):
    """Lookup, update or delete target does not exist (404)."""

    message = "Event not found"
    status_code = 404


class StoreOperationError(EventhubError):
    """Document store call failed or rejected its arguments (500)."""

    pass


def format_api_error(exc: EventhubError) -> dict[str, str]:
    """Body sent to clients. Never carries driver details or tracebacks."""
    return {"error": exc.message}


def format_log_error(exc: BaseException) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "error_type": type(exc).__name__,
        "error": str(exc),
    }
    if isinstance(exc, EventhubError):
        entry["status_code"] = exc.status_code
    cause = exc.__cause__
    if cause is not None:
        entry["cause_type"] = type(cause).__name__
        entry["cause"] = str(cause)
    return entry
