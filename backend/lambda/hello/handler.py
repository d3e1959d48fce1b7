"""Lambda entrypoint for the hello world endpoint."""

from __future__ import annotations

from typing import Any

from lambdakit.api.http_handlers import hello_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the hello world handler."""
    return _handler(event, context)
