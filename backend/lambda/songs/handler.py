"""Lambda entrypoint for the song lookup."""

from __future__ import annotations

from typing import Any

from lambdakit.api.songs import lambda_handler as _handler


def lambda_handler(event: Any, context: Any) -> list[dict[str, Any]]:
    """Delegate to the song lookup handler."""
    return _handler(event, context)
