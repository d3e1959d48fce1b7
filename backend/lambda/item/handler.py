"""Lambda entrypoint for the item path endpoint."""

from __future__ import annotations

from typing import Any

from lambdakit.api.http_handlers import item_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the item handler."""
    return _handler(event, context)
