"""Store the invocation payload in S3.

This is a write path: serialization and S3 failures are not recovered
and surface to the Lambda runtime as invocation errors.
"""

from __future__ import annotations

import json
from typing import Any
from typing import Optional

from lambdakit.config import Settings
from lambdakit.config import get_settings
from lambdakit.services.aws_clients import get_s3_client
from lambdakit.utils.logging import configure_logging
from lambdakit.utils.logging import get_logger
from lambdakit.utils.logging import request_id_from
from lambdakit.utils.logging import set_request_context

configure_logging()
logger = get_logger(__name__)


def upload_event(
    event: Any,
    settings: Settings,
    client: Optional[Any] = None,
) -> dict[str, Any]:
    """Write the JSON-encoded event to the configured bucket and key.

    Raises:
        TypeError: If the event is not JSON serializable.
        ClientError: If S3 rejects the write.
        BotoCoreError: If the endpoint cannot be reached.
    """
    body = json.dumps(
        event, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")

    if client is None:
        client = get_s3_client(settings.s3)

    client.put_object(
        Bucket=settings.upload_bucket,
        Key=settings.upload_key,
        Body=body,
    )
    logger.info(
        "Event uploaded",
        extra={
            "bucket": settings.upload_bucket,
            "key": settings.upload_key,
            "size": len(body),
        },
    )
    return {"status": "uploaded"}


def lambda_handler(event: Any, context: Any) -> dict[str, Any]:
    """Lambda handler for the S3 upload."""
    settings = get_settings()
    set_request_context(
        req_id=request_id_from(event, context),
        mode=settings.mode.value,
    )
    return upload_event(event, settings)
