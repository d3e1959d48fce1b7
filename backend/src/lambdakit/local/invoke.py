"""Invoke the example functions in-process, as the local proxy would."""

from __future__ import annotations

import uuid
from types import SimpleNamespace
from typing import Any
from typing import Mapping
from typing import Optional
from urllib.parse import parse_qsl
from urllib.parse import urlsplit

from lambdakit.local.events import build_proxy_event
from lambdakit.local.events import normalize_proxy_response
from lambdakit.local.functions import build_router
from lambdakit.local.functions import get_function
from lambdakit.utils.logging import get_logger
from lambdakit.utils.responses import error_response

logger = get_logger(__name__)

NOT_FOUND = 404
BAD_REQUEST = 400


def local_context(function_name: str) -> SimpleNamespace:
    """A stand-in for the Lambda context object."""
    return SimpleNamespace(
        function_name=function_name,
        aws_request_id=str(uuid.uuid4()),
    )


def invoke_function(name: str, event: Any) -> Any:
    """Invoke a registered function directly with a ready-made event."""
    fn = get_function(name)
    logger.info(f"Invoking {name}")
    return fn.handler(event, local_context(name))


def invoke_http(
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
) -> dict[str, Any]:
    """Route an HTTP request to the bound function and return its response.

    Unknown routes answer 404 and requests missing required parameters
    answer 400, both without invoking any function.
    """
    router, owners = build_router()
    path = urlsplit(url).path or "/"
    route = router.find(method, path)
    if route is None:
        return error_response(NOT_FOUND, f"No route for {method} {path}")

    query = dict(parse_qsl(urlsplit(url).query, keep_blank_values=True))
    errors = route.validate(query, headers or {})
    if errors:
        return error_response(BAD_REQUEST, "; ".join(errors))

    fn = owners[id(route)]
    event = build_proxy_event(route, method, url, headers=headers, body=body)
    logger.info(f"Proxying {method.upper()} {path} to {fn.name}")
    return normalize_proxy_response(fn.handler(event, local_context(fn.name)))
