"""Song lookup by artist, backed by DynamoDB.

The read path degrades gracefully: a missing artist yields an empty list
without touching DynamoDB, and a failed query yields an empty list unless
``READ_ERROR_POLICY=raise`` is configured.
"""

from __future__ import annotations

from typing import Any
from typing import Mapping
from typing import Optional

from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError

from lambdakit.api.schemas import Song
from lambdakit.config import ReadErrorPolicy
from lambdakit.config import Settings
from lambdakit.config import get_settings
from lambdakit.services.aws_clients import get_dynamodb_client
from lambdakit.utils import mask_pii
from lambdakit.utils import optional_str
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import request_id_from
from lambdakit.utils.logging import set_request_context
from lambdakit.utils.responses import serialize_body

configure_logging()
logger = get_logger(__name__)

DynamoDbItem = Mapping[str, Mapping[str, Any]]


def attribute_str(item: DynamoDbItem, key: str) -> str:
    """Return a string (``S``) attribute, or ``""`` if absent or another type."""
    value = item.get(key)
    if isinstance(value, Mapping) and isinstance(value.get("S"), str):
        return value["S"]
    return ""


def attribute_int(item: DynamoDbItem, key: str) -> int:
    """Return a number (``N``) attribute as a non-negative int, else ``0``."""
    value = item.get(key)
    if not isinstance(value, Mapping):
        return 0
    raw = value.get("N")
    if not isinstance(raw, str):
        return 0
    try:
        number = int(raw)
    except ValueError:
        return 0
    return number if number >= 0 else 0


def song_from_item(item: DynamoDbItem) -> Song:
    return Song(
        artist=attribute_str(item, "Artist"),
        songTitle=attribute_str(item, "SongTitle"),
        albumTitle=attribute_str(item, "AlbumTitle"),
        awards=attribute_int(item, "Awards"),
    )


def query_songs(client: Any, table_name: str, artist: str) -> list[Song]:
    """Query every song of an artist.

    Raises:
        ClientError: If DynamoDB rejects the query.
        BotoCoreError: If the endpoint cannot be reached.
    """
    response = client.query(
        TableName=table_name,
        KeyConditionExpression="#key = :value",
        ExpressionAttributeNames={"#key": "Artist"},
        ExpressionAttributeValues={":value": {"S": artist}},
        Select="ALL_ATTRIBUTES",
    )
    return [song_from_item(item) for item in response.get("Items") or []]


def list_songs(
    event: Any,
    settings: Settings,
    client: Optional[Any] = None,
) -> list[dict[str, Any]]:
    """List songs for the ``artist`` field of a generic event.

    Args:
        event: Invocation payload.
        settings: Process settings.
        client: DynamoDB client; resolved from settings when omitted.

    Returns:
        A list of camelCase song records, possibly empty.
    """
    artist = optional_str(event, "artist")
    if artist is None:
        logger.info("No artist in event, returning empty result")
        return []

    try:
        if client is None:
            client = get_dynamodb_client(settings.dynamodb)
        songs = query_songs(client, settings.songs_table, artist)
    except (ClientError, BotoCoreError) as exc:
        if settings.read_error_policy is ReadErrorPolicy.RAISE:
            raise
        logger.warning(
            f"Song query failed, returning empty result: {exc}",
            extra={"artist": mask_pii(artist), "table": settings.songs_table},
        )
        return []

    logger.info(
        f"Song query returned {len(songs)} items",
        extra={"artist": mask_pii(artist)},
    )
    return serialize_body(songs)


def lambda_handler(event: Any, context: Any) -> list[dict[str, Any]]:
    """Lambda handler for the song lookup."""
    settings = get_settings()
    set_request_context(
        req_id=request_id_from(event, context),
        mode=settings.mode.value,
    )
    return list_songs(event, settings)
