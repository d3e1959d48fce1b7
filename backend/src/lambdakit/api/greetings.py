"""Greeting handlers for generic (non-HTTP) invocations.

These handlers accept any JSON payload and never fail on bad input:
missing or wrong-typed fields fall back to fixed default names.
"""

from __future__ import annotations

from typing import Any

from lambdakit.api.schemas import Person
from lambdakit.config import Settings
from lambdakit.config import get_settings
from lambdakit.utils import optional_str
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import request_id_from
from lambdakit.utils.logging import set_request_context

configure_logging()
logger = get_logger(__name__)

DEFAULT_NAME = "world"


def greet(event: Any, settings: Settings) -> dict[str, Any]:
    """Greet ``firstName`` with the configured greeting and status text."""
    first_name = optional_str(event, "firstName", DEFAULT_NAME)
    return {
        "message": f"Hi, {first_name}!",
        "greeting": settings.greeting,
        "status": settings.status,
    }


def greet_full_name(event: Any) -> dict[str, Any]:
    person = Person.from_payload(event)
    return {"message": f"Hi, {person.full_name()}!"}


def greet_last_name(event: Any) -> dict[str, Any]:
    person = Person.from_payload(event)
    return {"message": f"Hi, {person.last_name_or_default()}!"}


def _start(event: Any, context: Any) -> Settings:
    settings = get_settings()
    set_request_context(
        req_id=request_id_from(event, context),
        mode=settings.mode.value,
    )
    return settings


def greet_handler(event: Any, context: Any) -> dict[str, Any]:
    """Lambda handler for the simple greeting."""
    settings = _start(event, context)
    if optional_str(event, "firstName") is None:
        logger.debug("firstName missing, using default")
    return greet(event, settings)


def full_name_handler(event: Any, context: Any) -> dict[str, Any]:
    """Lambda handler greeting a Person by first and last name."""
    _start(event, context)
    return greet_full_name(event)


def last_name_handler(event: Any, context: Any) -> dict[str, Any]:
    """Lambda handler greeting a Person by last name."""
    _start(event, context)
    return greet_last_name(event)
