"""Translate local HTTP requests into API Gateway proxy events and back."""

from __future__ import annotations

import json
import time
import uuid
from typing import Any
from typing import Mapping
from typing import Optional
from urllib.parse import parse_qs
from urllib.parse import urlsplit

from lambdakit.local.routes import Route

INTERNAL_SERVER_ERROR = 500


def _query_parameters(
    query: str,
) -> tuple[Optional[dict[str, str]], Optional[dict[str, list[str]]]]:
    multi = parse_qs(query, keep_blank_values=True)
    if not multi:
        return None, None
    single = {key: values[-1] for key, values in multi.items()}
    return single, multi


def build_proxy_event(
    route: Route,
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> dict[str, Any]:
    """Build an API Gateway (REST, payload v1) proxy event.

    Args:
        route: The route the request matched.
        method: HTTP method of the request.
        url: Request target, a path with an optional query string.
        headers: Request headers.
        body: Request body text; omitted from the event when empty.

    Returns:
        The proxy event dictionary.
    """
    parts = urlsplit(url)
    path = parts.path or "/"
    single, multi = _query_parameters(parts.query)
    header_map = dict(headers or {})
    path_parameters = route.path_parameters(path)

    event: dict[str, Any] = {
        "resource": route.path,
        "path": path,
        "httpMethod": method.upper(),
        "headers": header_map,
        "multiValueHeaders": {key: [value] for key, value in header_map.items()},
        "queryStringParameters": single,
        "multiValueQueryStringParameters": multi,
        "pathParameters": path_parameters or None,
        "stageVariables": {},
        "requestContext": {
            "requestId": str(uuid.uuid4()),
            "identity": {},
            "authorizer": {},
            "httpMethod": method.upper(),
            "resourcePath": route.path,
            "requestTimeEpoch": int(time.time() * 1000),
        },
        "isBase64Encoded": False,
    }
    if body:
        event["body"] = body
    return event


def normalize_proxy_response(raw: Any) -> dict[str, Any]:
    """Coerce handler output into an API Gateway proxy response.

    Output that already carries a ``statusCode`` passes through. Any other
    JSON object becomes a 500 JSON response, and text that is not JSON
    becomes a 500 plain-text response.
    """
    output = raw
    if isinstance(raw, (str, bytes)):
        try:
            output = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            output = None

    if isinstance(output, dict) and output.get("statusCode"):
        return output

    if isinstance(output, dict) and output:
        return {
            "statusCode": INTERNAL_SERVER_ERROR,
            "headers": {"content-type": "application/json"},
            "body": json.dumps(output),
        }

    text = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else str(raw)
    return {
        "statusCode": INTERNAL_SERVER_ERROR,
        "headers": {"content-type": "text/plain"},
        "body": text,
    }


def format_json(text: str) -> str:
    """Pretty-print JSON text; anything else is returned unchanged."""
    try:
        return json.dumps(json.loads(text), indent=2)
    except (json.JSONDecodeError, TypeError):
        return text
