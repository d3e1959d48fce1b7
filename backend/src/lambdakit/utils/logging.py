"""Structured logging utilities for Lambda functions.

This module provides JSON-formatted logging with request context,
suitable for CloudWatch Logs Insights queries. When running against the
local emulators the same JSON lines land in the container output.

SECURITY NOTES:
- Use mask_pii() when logging names or other caller-supplied values
- Never log credentials or full request bodies
"""

from __future__ import annotations

import json
import logging
import os
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Mapping
from typing import MutableMapping
from typing import Optional


def mask_pii(value: str, visible_chars: int = 4) -> str:
    """Mask a PII value for safe logging.

    Args:
        value: The value to mask.
        visible_chars: Number of characters to show at the start.

    Returns:
        A masked version showing only the first few characters.

    Examples:
        >>> mask_pii("Lovelace")
        'Love***'
        >>> mask_pii("Ada")
        'A***'
    """
    if not value:
        return "***"
    if len(value) <= visible_chars:
        return value[0] + "***"
    return value[:visible_chars] + "***"


# Context variables for request tracking
request_id: ContextVar[str] = ContextVar("request_id", default="")
runtime_mode: ContextVar[str] = ContextVar("runtime_mode", default="")


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Produces log entries compatible with CloudWatch Logs Insights,
    including request context and exception details.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        req_id = request_id.get()
        if req_id:
            log_data["request_id"] = req_id

        mode = runtime_mode.get()
        if mode:
            log_data["runtime_mode"] = mode

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
                "traceback": traceback.format_exception(*record.exc_info),
            }

        if hasattr(record, "extra") and isinstance(record.extra, dict):
            log_data["extra"] = record.extra

        return json.dumps(log_data, default=str)


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that nests keyword context under ``extra``."""

    def process(
        self,
        msg: str,
        kwargs: MutableMapping[str, Any],
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Process log message to include extra context."""
        extra = dict(kwargs.get("extra") or {})

        if self.extra:
            extra.update(self.extra)

        kwargs["extra"] = {"extra": extra} if extra else {}
        return msg, kwargs


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structured logging for Lambda execution.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
               LOG_LEVEL environment variable or INFO.
    """
    log_level: str = level or os.getenv("LOG_LEVEL") or "INFO"

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredLogFormatter())
    root_logger.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("boto3").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str, **extra: Any) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name (typically __name__).
        **extra: Additional context to include in all log messages.

    Returns:
        A ContextLogger instance.
    """
    logger = logging.getLogger(name)
    return ContextLogger(logger, extra)


def set_request_context(
    req_id: Optional[str] = None,
    mode: Optional[str] = None,
) -> None:
    """Set request context for logging.

    Call this at the start of each Lambda invocation.

    Args:
        req_id: AWS request ID from the Lambda context or API Gateway.
        mode: Runtime mode the process resolved at cold start.
    """
    if req_id:
        request_id.set(req_id)
    if mode:
        runtime_mode.set(mode)


def clear_request_context() -> None:
    """Clear request context after Lambda invocation."""
    request_id.set("")
    runtime_mode.set("")


def request_id_from(event: Mapping[str, Any], context: Any) -> str:
    """Pick the best available request identifier for an invocation.

    The Lambda context's ``aws_request_id`` wins; API Gateway events fall
    back to ``requestContext.requestId``.
    """
    aws_request_id = getattr(context, "aws_request_id", None)
    if isinstance(aws_request_id, str) and aws_request_id:
        return aws_request_id
    request_context = event.get("requestContext") if isinstance(event, Mapping) else None
    if isinstance(request_context, Mapping):
        value = request_context.get("requestId")
        if isinstance(value, str):
            return value
    return ""


def log_response(
    logger: ContextLogger,
    status_code: int,
    duration_ms: Optional[float] = None,
) -> None:
    """Log HTTP response details.

    Args:
        logger: The logger to use.
        status_code: HTTP status code of the response.
        duration_ms: Request duration in milliseconds.
    """
    log_data: dict[str, Any] = {"status_code": status_code}
    if duration_ms is not None:
        log_data["duration_ms"] = round(duration_ms, 2)

    level = logging.INFO if status_code < 400 else logging.WARNING
    logger.log(level, "Lambda response", extra={"response": log_data})
