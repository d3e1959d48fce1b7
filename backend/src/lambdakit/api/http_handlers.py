"""Handlers for API Gateway proxy events.

Each handler makes a single pass over the request: validate the path
parameter or body, then answer with a JSON body. Invalid input becomes a
400 response; anything else that goes wrong propagates to the runtime.
"""

from __future__ import annotations

import time
from typing import Any
from typing import Callable
from typing import Mapping

import pydantic

from lambdakit.api.schemas import MessageSchema
from lambdakit.api.schemas import Person
from lambdakit.config import get_settings
from lambdakit.exceptions import ValidationError
from lambdakit.utils import mask_pii
from lambdakit.utils import parse_int
from lambdakit.utils import parse_json_body
from lambdakit.utils import path_param
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import log_response
from lambdakit.utils.logging import request_id_from
from lambdakit.utils.logging import set_request_context
from lambdakit.utils.responses import app_error_response
from lambdakit.utils.responses import json_response

configure_logging()
logger = get_logger(__name__)

HttpHandler = Callable[[Mapping[str, Any]], dict[str, Any]]


def hello(event: Mapping[str, Any]) -> dict[str, Any]:
    return json_response(200, MessageSchema(message="Hello World!"))


def get_item(event: Mapping[str, Any]) -> dict[str, Any]:
    """Echo the numeric ``id`` path parameter."""
    raw_id = path_param(event, "id")
    if raw_id is None:
        raise ValidationError("No id provided", field="id")
    # int() alone would accept "+4", " 4" and "4_2"
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise ValidationError("id must be a non-negative integer", field="id")
    return json_response(200, {"id": parse_int(raw_id)})


def greet_path(event: Mapping[str, Any]) -> dict[str, Any]:
    first_name = path_param(event, "firstName")
    if first_name is None:
        raise ValidationError("I can't find your name", field="firstName")
    return json_response(200, MessageSchema(message=f"Hi, {first_name}!"))


def parse_person(event: Mapping[str, Any]) -> Person | None:
    """Deserialize the request body into a Person.

    Returns:
        The Person, or None when the request has no body.

    Raises:
        ValidationError: If the body is not a JSON object with string
            ``firstName`` / ``lastName`` fields.
    """
    payload = parse_json_body(event)
    if payload is None:
        return None
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", field="body")
    try:
        return Person.model_validate(payload)
    except pydantic.ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ValidationError(
            f"Request body does not describe a person: {fields}", field="body"
        ) from exc


def greet_body(event: Mapping[str, Any]) -> dict[str, Any]:
    person = parse_person(event)
    if person is None:
        return json_response(200, MessageSchema(message="No one found"))
    logger.debug(
        "Greeting person from body",
        extra={"last_name": mask_pii(person.last_name or "")},
    )
    return json_response(200, MessageSchema(message=f"Hi, {person.full_name()}!"))


def dispatch(
    handler: HttpHandler,
    event: Mapping[str, Any],
    context: Any,
) -> dict[str, Any]:
    """Run an HTTP handler, turning validation failures into 400 responses."""
    start_time = time.perf_counter()
    settings = get_settings()
    set_request_context(
        req_id=request_id_from(event, context),
        mode=settings.mode.value,
    )

    try:
        response = handler(event)
    except ValidationError as exc:
        logger.warning(f"Validation error: {exc.message}")
        response = app_error_response(exc)

    log_response(
        logger,
        response["statusCode"],
        duration_ms=(time.perf_counter() - start_time) * 1000,
    )
    return response


def hello_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    return dispatch(hello, event, context)


def item_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    return dispatch(get_item, event, context)


def greet_path_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    return dispatch(greet_path, event, context)


def greet_body_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    return dispatch(greet_body, event, context)
