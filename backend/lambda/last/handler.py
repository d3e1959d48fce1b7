"""Lambda entrypoint for the last name greeting."""

from __future__ import annotations

from typing import Any

from lambdakit.api.greetings import last_name_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the last name greeting handler."""
    return _handler(event, context)
