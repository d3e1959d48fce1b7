"""Shared parsing utilities for request handling."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any
from typing import Mapping
from typing import Optional

from lambdakit.exceptions import ValidationError


def optional_str(
    payload: Any,
    key: str,
    default: Optional[str] = None,
) -> Optional[str]:
    """Extract a string field from a loosely shaped payload.

    Never raises: a payload that is not a mapping, a missing key, or a
    value that is not a string all yield ``default``.

    Args:
        payload: The event or record to read from.
        key: The top-level field name.
        default: Value returned when the field is unusable.

    Returns:
        The string value, or ``default``.
    """
    if not isinstance(payload, Mapping):
        return default
    value = payload.get(key)
    if isinstance(value, str):
        return value
    return default


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an integer from a string.

    Args:
        value: The string value to parse, or None.

    Returns:
        The parsed integer, or None if input is None or empty.

    Raises:
        ValueError: If the string cannot be converted to an integer.
    """
    if value is None or value == "":
        return None
    return int(value)


def path_param(event: Mapping[str, Any], key: str) -> Optional[str]:
    """Return a single-valued path parameter from an API Gateway event."""
    params = event.get("pathParameters") or {}
    if not isinstance(params, Mapping):
        return None
    value = params.get(key)
    if isinstance(value, str) and value != "":
        return value
    return None


def raw_body(event: Mapping[str, Any]) -> Optional[str]:
    """Return the request body as text, decoding base64 when flagged.

    Returns:
        The body text, or None when the request carries no body.

    Raises:
        ValidationError: If a base64-flagged body cannot be decoded.
    """
    body = event.get("body")
    if body is None or body == "":
        return None
    if not isinstance(body, str):
        raise ValidationError("Request body must be a string", field="body")
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValidationError(
                "Request body is not valid base64", field="body"
            ) from exc
    return body


def parse_json_body(event: Mapping[str, Any]) -> Optional[Any]:
    """Parse the JSON request body of an API Gateway event.

    Returns:
        The decoded JSON value, or None when the request has no body.

    Raises:
        ValidationError: If the body is present but is not valid JSON.
    """
    text = raw_body(event)
    if text is None:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValidationError(
            f"Request body is not valid JSON: {exc.msg}", field="body"
        ) from exc
