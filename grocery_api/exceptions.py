"""Exception types for the grocery tracker.

Each exception carries the HTTP status code it maps to, so route handlers can
let them propagate and the application-level handlers render a JSON body.
"""

from typing import Any


class GroceryError(Exception):
    """Base exception for grocery tracker errors."""

    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(GroceryError):
    """Raised for missing or malformed input, checked before touching the store."""

    status_code = 400


class AuthError(GroceryError):
    """Raised when credentials do not match an account."""

    status_code = 401


class NotFoundError(GroceryError):
    """Raised when a row is absent or not owned by the caller."""

    status_code = 404


class ConflictError(GroceryError):
    """Raised when a concurrent mutation removed a row mid-operation."""

    status_code = 409


class StoreError(GroceryError):
    """Raised when the underlying relational store fails."""

    status_code = 500

    def __init__(self, message: str, error: Exception | None = None):
        details = {}
        if error is not None:
            details = {"error": str(error), "error_type": type(error).__name__}
        super().__init__(message, details)


def parse_positive_id(value: Any, field: str) -> int:
    """Parse an identifier that must be a positive integer.

    Accepts ints and numeric strings; anything else (including booleans,
    zero and negatives) raises ValidationError.
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field} is required")
    try:
        parsed = int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid {field}: {value!r}") from None
    if parsed <= 0:
        raise ValidationError(f"Invalid {field}: {value!r}")
    return parsed
