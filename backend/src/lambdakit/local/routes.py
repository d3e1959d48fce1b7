"""API Gateway style routing for local invocation.

Path templates use the API Gateway syntax: ``/items/{id}`` captures one
path segment, ``/files/{proxy+}`` captures the rest of the path.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Mapping
from typing import Optional

SUPPORTED_METHODS = ("OPTIONS", "HEAD", "GET", "POST", "PUT", "PATCH", "DELETE")

_PARAM_SEGMENT = re.compile(r"^\{(?P<name>[^{}]+?)(?P<greedy>\+)?\}$")


def compile_path(template: str) -> tuple[re.Pattern[str], list[str]]:
    """Compile a path template into a regex and its parameter names.

    A trailing slash on the request path is tolerated.
    """
    names: list[str] = []
    parts: list[str] = []
    for segment in template.split("/"):
        if not segment:
            continue
        match = _PARAM_SEGMENT.match(segment)
        if match:
            names.append(match.group("name"))
            parts.append("(.+)" if match.group("greedy") else "([^/]+)")
        else:
            parts.append(re.escape(segment))
    pattern = "^/" + "/".join(parts) + "/?$"
    return re.compile(pattern), names


@dataclass
class Route:
    """One HTTP event binding of a function.

    Attributes:
        method: HTTP method, upper-case.
        path: API Gateway path template.
        query_params: Query string names mapped to whether they are required.
        header_params: Header names mapped to whether they are required.
    """

    method: str
    path: str
    query_params: dict[str, bool] = field(default_factory=dict)
    header_params: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.method = self.method.upper()
        if self.method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported method: {self.method}")
        self._regex, self._names = compile_path(self.path)

    @property
    def parameter_names(self) -> list[str]:
        return list(self._names)

    def match(self, path: str) -> bool:
        return self._regex.match(path) is not None

    def path_parameters(self, path: str) -> dict[str, str]:
        """Extract the template parameters from a concrete path."""
        match = self._regex.match(path)
        if not match:
            return {}
        return dict(zip(self._names, match.groups()))

    def validate(
        self,
        query: Mapping[str, Any],
        headers: Mapping[str, Any],
    ) -> list[str]:
        """Check required query string and header parameters.

        Header names are compared case-insensitively.

        Returns:
            One message per missing parameter; empty when valid.
        """
        errors: list[str] = []
        for key, required in self.query_params.items():
            if required and key not in query:
                errors.append(f'query parameter "{key}" is required')

        lowered = {str(name).lower(): value for name, value in headers.items()}
        for key, required in self.header_params.items():
            if required and not lowered.get(key.lower()):
                errors.append(f'header parameter "{key}" is required')
        return errors


class Router:
    """Ordered route table, grouped by HTTP method."""

    def __init__(self) -> None:
        self._routes: dict[str, list[Route]] = {m: [] for m in SUPPORTED_METHODS}

    def add(self, route: Route) -> None:
        self._routes[route.method].append(route)

    def has_routes(self) -> bool:
        return any(self._routes.values())

    def all_routes(self) -> list[Route]:
        return [route for routes in self._routes.values() for route in routes]

    def find(self, method: str, path: str) -> Optional[Route]:
        """Return the first route registered for method that matches path."""
        method = method.upper()
        if method not in self._routes:
            raise ValueError(f"Unsupported method: {method}")
        for route in self._routes[method]:
            if route.match(path):
                return route
        return None
