"""Lambda entrypoint for the first and last name greeting."""

from __future__ import annotations

from typing import Any

from lambdakit.api.greetings import full_name_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the full name greeting handler."""
    return _handler(event, context)
