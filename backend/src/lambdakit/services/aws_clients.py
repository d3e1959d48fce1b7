"""Shared boto3 client factory with caching."""

from __future__ import annotations

from typing import Any

import boto3

from lambdakit.config import EndpointConfig

_CLIENT_CACHE: dict[tuple[str, EndpointConfig], Any] = {}


def get_client(service: str, endpoint: EndpointConfig) -> Any:
    """Return a cached boto3 client for the service and endpoint."""
    cache_key = (service, endpoint)
    if cache_key in _CLIENT_CACHE:
        return _CLIENT_CACHE[cache_key]
    client = boto3.client(  # type: ignore[call-overload]
        service,
        **endpoint.client_kwargs(),
    )
    _CLIENT_CACHE[cache_key] = client
    return client


def clear_client_cache() -> None:
    """Clear cached boto3 clients (useful in tests)."""
    _CLIENT_CACHE.clear()


def get_dynamodb_client(endpoint: EndpointConfig) -> Any:
    return get_client("dynamodb", endpoint)


def get_s3_client(endpoint: EndpointConfig) -> Any:
    return get_client("s3", endpoint)
