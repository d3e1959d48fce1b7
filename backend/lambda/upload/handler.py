"""Lambda entrypoint for the S3 event upload."""

from __future__ import annotations

from typing import Any

from lambdakit.api.uploads import lambda_handler as _handler


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Delegate to the upload handler."""
    return _handler(event, context)
