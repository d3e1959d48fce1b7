"""Lambda entrypoint for the JSON body greeting endpoint."""

from __future__ import annotations

from typing import Any

from lambdakit.api.http_handlers import greet_body_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the body greeting handler."""
    return _handler(event, context)
