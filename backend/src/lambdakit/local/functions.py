"""Registry of the example functions for local invocation."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Callable

from lambdakit.api import greetings
from lambdakit.api import http_handlers
from lambdakit.api import songs
from lambdakit.api import uploads
from lambdakit.local.routes import Route
from lambdakit.local.routes import Router

LambdaHandler = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class FunctionDef:
    """A deployable function: its entrypoint and optional HTTP bindings."""

    name: str
    handler: LambdaHandler
    routes: tuple[Route, ...] = field(default_factory=tuple)

    @property
    def is_http(self) -> bool:
        return bool(self.routes)


FUNCTIONS: dict[str, FunctionDef] = {
    fn.name: fn
    for fn in (
        FunctionDef("simple", greetings.greet_handler),
        FunctionDef("first-and-last", greetings.full_name_handler),
        FunctionDef("last", greetings.last_name_handler),
        FunctionDef("songs", songs.lambda_handler),
        FunctionDef("upload", uploads.lambda_handler),
        FunctionDef("hello", http_handlers.hello_handler, (Route("GET", "/"),)),
        FunctionDef(
            "item",
            http_handlers.item_handler,
            (Route("GET", "/items/{id}"),),
        ),
        FunctionDef(
            "greet-path",
            http_handlers.greet_path_handler,
            (Route("GET", "/hello/{firstName}"),),
        ),
        FunctionDef(
            "greet-body",
            http_handlers.greet_body_handler,
            (Route("POST", "/hello"),),
        ),
    )
}


def get_function(name: str) -> FunctionDef:
    """Look up a registered function.

    Raises:
        KeyError: If no function has that name.
    """
    try:
        return FUNCTIONS[name]
    except KeyError:
        known = ", ".join(sorted(FUNCTIONS))
        raise KeyError(f"Unknown function {name!r}; expected one of: {known}") from None


def build_router() -> tuple[Router, dict[int, FunctionDef]]:
    """Build a router over every HTTP-bound function.

    Returns:
        The router and a map from ``id(route)`` to its owning function.
    """
    router = Router()
    owners: dict[int, FunctionDef] = {}
    for fn in FUNCTIONS.values():
        for route in fn.routes:
            router.add(route)
            owners[id(route)] = fn
    return router, owners
