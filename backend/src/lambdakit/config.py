"""Runtime mode and endpoint resolution.

Every handler process decides once, at cold start, whether it talks to
real AWS services or to the local emulators started by docker-compose.
The decision is driven by the ``ENV`` variable: the exact value
``local`` selects the fixed local endpoints, anything else (including an
unset variable) leaves endpoint discovery to boto3's default chain.

The resulting :class:`Settings` value is immutable and is passed into
business logic explicitly; nothing below the handler boundary reads
``os.environ`` again.
"""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Any
from typing import Mapping
from typing import Optional

from lambdakit.exceptions import ConfigurationError

MODE_ENV_VAR = "ENV"
LOCAL_SENTINEL = "local"

# Hostname must match the service name in docker-compose.
DEFAULT_DDB_LOCAL_ENDPOINT = "http://ddb:8000"
DEFAULT_S3_LOCAL_ENDPOINT = "http://host.docker.internal:4569"

DEFAULT_SONGS_TABLE = "Music"
DEFAULT_UPLOAD_BUCKET = "local-bucket"
DEFAULT_UPLOAD_KEY = "output"
DEFAULT_GREETING = "Good morning"
DEFAULT_STATUS = "Happy"


class RuntimeMode(str, enum.Enum):
    """Where downstream AWS calls are sent."""

    PRODUCTION = "production"
    LOCAL = "local"

    @classmethod
    def from_env(cls, value: Optional[str]) -> "RuntimeMode":
        """Parse the mode selector; only the exact sentinel means local."""
        if value == LOCAL_SENTINEL:
            return cls.LOCAL
        return cls.PRODUCTION


class ReadErrorPolicy(str, enum.Enum):
    """What a read-path handler does when its downstream call fails."""

    EMPTY = "empty"
    RAISE = "raise"


@dataclass(frozen=True)
class EndpointConfig:
    """Client configuration for one AWS service.

    In production ``local_address`` is kept for reference but never used;
    credentials, region and service address come from boto3's default
    discovery chain.
    """

    mode: RuntimeMode
    local_address: str
    region_name: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return self.mode is RuntimeMode.LOCAL

    @property
    def endpoint_url(self) -> Optional[str]:
        return self.local_address if self.is_local else None

    def client_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``boto3.client``."""
        kwargs: dict[str, Any] = {}
        if self.region_name:
            kwargs["region_name"] = self.region_name
        if self.is_local:
            kwargs["endpoint_url"] = self.local_address
        return kwargs


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def resolve_mode(environ: Optional[Mapping[str, str]] = None) -> RuntimeMode:
    """Read the runtime mode from the environment."""
    return RuntimeMode.from_env(_environ(environ).get(MODE_ENV_VAR))


def _region(env: Mapping[str, str]) -> Optional[str]:
    return env.get("AWS_REGION") or env.get("AWS_DEFAULT_REGION") or None


def resolve_endpoint(
    local_address: str,
    environ: Optional[Mapping[str, str]] = None,
) -> EndpointConfig:
    """Resolve the endpoint configuration for a single service.

    Args:
        local_address: Address used when the process runs in local mode.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        An EndpointConfig bound to ``local_address`` in local mode,
        otherwise one that defers to the default discovery chain.
    """
    env = _environ(environ)
    return EndpointConfig(
        mode=resolve_mode(env),
        local_address=local_address,
        region_name=_region(env),
    )


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at cold start."""

    mode: RuntimeMode
    dynamodb: EndpointConfig
    s3: EndpointConfig
    songs_table: str = DEFAULT_SONGS_TABLE
    upload_bucket: str = DEFAULT_UPLOAD_BUCKET
    upload_key: str = DEFAULT_UPLOAD_KEY
    greeting: str = DEFAULT_GREETING
    status: str = DEFAULT_STATUS
    read_error_policy: ReadErrorPolicy = ReadErrorPolicy.EMPTY


def _parse_policy(value: Optional[str]) -> ReadErrorPolicy:
    if value is None or value == "":
        return ReadErrorPolicy.EMPTY
    try:
        return ReadErrorPolicy(value.strip().lower())
    except ValueError as exc:
        raise ConfigurationError("READ_ERROR_POLICY", value) from exc


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from the environment.

    Display-text overrides (``GREETING``, ``STATUS``) are consumed
    verbatim, including an explicitly empty value.

    Raises:
        ConfigurationError: If ``READ_ERROR_POLICY`` is not recognised.
    """
    env = _environ(environ)
    dynamodb = resolve_endpoint(
        env.get("DDB_LOCAL_ENDPOINT") or DEFAULT_DDB_LOCAL_ENDPOINT, env
    )
    s3 = resolve_endpoint(
        env.get("S3_LOCAL_ENDPOINT") or DEFAULT_S3_LOCAL_ENDPOINT, env
    )

    return Settings(
        mode=dynamodb.mode,
        dynamodb=dynamodb,
        s3=s3,
        songs_table=env.get("SONGS_TABLE_NAME") or DEFAULT_SONGS_TABLE,
        upload_bucket=env.get("UPLOAD_BUCKET_NAME") or DEFAULT_UPLOAD_BUCKET,
        upload_key=env.get("UPLOAD_OBJECT_KEY") or DEFAULT_UPLOAD_KEY,
        greeting=env.get("GREETING", DEFAULT_GREETING),
        status=env.get("STATUS", DEFAULT_STATUS),
        read_error_policy=_parse_policy(env.get("READ_ERROR_POLICY")),
    )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def clear_settings_cache() -> None:
    """Forget the loaded settings (useful in tests)."""
    global _SETTINGS
    _SETTINGS = None
