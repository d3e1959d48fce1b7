"""Shared response utilities for Lambda handlers."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any
from typing import Optional

from pydantic import BaseModel

from lambdakit.exceptions import AppError


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[dict[str, str]] = None,
) -> dict[str, Any]:
    """Create a JSON API Gateway response.

    Args:
        status_code: HTTP status code.
        body: Response body (dict, list, Pydantic model, or dataclass).
        headers: Optional additional headers to include.

    Returns:
        API Gateway response dictionary.

    Raises:
        TypeError: If the body cannot be serialized to JSON.
    """
    response_headers = {
        "Content-Type": "application/json",
    }

    if headers:
        response_headers.update(headers)

    payload = serialize_body(body)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(payload),
    }


def serialize_body(body: Any) -> Any:
    """Serialize a response body to a JSON-compatible value.

    Pydantic models are dumped by alias so camelCase field names survive.
    """
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True)

    if isinstance(body, list):
        return [serialize_body(item) for item in body]

    if hasattr(body, "__dataclass_fields__"):
        return asdict(body)

    return body


def error_response(
    status_code: int,
    message: str,
    detail: Optional[str] = None,
) -> dict[str, Any]:
    """Create an error response with a ``message`` field.

    Args:
        status_code: HTTP status code.
        message: Error message.
        detail: Optional additional detail.

    Returns:
        API Gateway response dictionary.
    """
    body: dict[str, Any] = {"message": message}
    if detail:
        body["detail"] = detail

    return json_response(status_code, body)


def app_error_response(exc: AppError) -> dict[str, Any]:
    """Turn an AppError into an API Gateway response."""
    return json_response(exc.status_code, exc.to_dict())
