"""Lambda entrypoint for the simple greeting."""

from __future__ import annotations

from typing import Any

from lambdakit.api.greetings import greet_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the greeting handler."""
    return _handler(event, context)
