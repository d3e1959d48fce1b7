"""Custom exception classes for the example handlers.

Exceptions carry an HTTP status code so HTTP-shaped handlers can turn
them into error responses, while generic handlers let them propagate to
the Lambda runtime as invocation errors.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for application errors.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        result: dict[str, Any] = {"message": self.message}
        if self.detail:
            result["detail"] = self.detail
        return result


class ValidationError(AppError):
    """Raised when a path parameter or request body is missing or invalid."""

    def __init__(self, message: str, field: Optional[str] = None):
        detail = f"Field: {field}" if field else None
        super().__init__(message, status_code=400, detail=detail)
        self.field = field


class ConfigurationError(AppError):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, config_name: str, value: Optional[str] = None):
        message = f"Invalid configuration: {config_name}"
        if value is not None:
            message = f"{message}={value!r}"
        super().__init__(message, status_code=500)
        self.config_name = config_name
        self.value = value
