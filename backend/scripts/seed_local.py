"""Create and seed the local DynamoDB table and S3 bucket.

Run this against the docker-compose emulators before invoking the songs
or upload functions with ``ENV=local``.
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any

import boto3
from botocore.exceptions import ClientError

from lambdakit.config import DEFAULT_SONGS_TABLE
from lambdakit.config import DEFAULT_UPLOAD_BUCKET
from lambdakit.config import EndpointConfig
from lambdakit.config import RuntimeMode

logger = logging.getLogger(__name__)

DEFAULT_SONGS_FILE = Path(__file__).resolve().parent / "data" / "songs.json"

# Emulators accept any credentials, but botocore refuses to sign without some.
LOCAL_ACCESS_KEY_ID = "somelocalkeyid"
LOCAL_SECRET_ACCESS_KEY = "somelocalaccesskey"


def _local_client(service: str, address: str, region: str) -> Any:
    endpoint = EndpointConfig(
        mode=RuntimeMode.LOCAL,
        local_address=address,
        region_name=region,
    )
    return boto3.client(  # type: ignore[call-overload]
        service,
        aws_access_key_id=LOCAL_ACCESS_KEY_ID,
        aws_secret_access_key=LOCAL_SECRET_ACCESS_KEY,
        **endpoint.client_kwargs(),
    )


def create_table(client: Any, table: str) -> bool:
    """Create the songs table; return False if it already exists."""
    try:
        client.create_table(
            TableName=table,
            AttributeDefinitions=[
                {"AttributeName": "Artist", "AttributeType": "S"},
                {"AttributeName": "SongTitle", "AttributeType": "S"},
            ],
            KeySchema=[
                {"AttributeName": "Artist", "KeyType": "HASH"},
                {"AttributeName": "SongTitle", "KeyType": "RANGE"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
    except ClientError as exc:
        if exc.response.get("Error", {}).get("Code") == "ResourceInUseException":
            return False
        raise
    return True


def seed_table(client: Any, table: str, items: list[dict[str, Any]]) -> int:
    for item in items:
        client.put_item(TableName=table, Item=item)
    return len(items)


def create_bucket(client: Any, bucket: str) -> bool:
    """Create the upload bucket; return False if it already exists."""
    try:
        client.create_bucket(Bucket=bucket)
    except ClientError as exc:
        code = exc.response.get("Error", {}).get("Code")
        if code in ("BucketAlreadyOwnedByYou", "BucketAlreadyExists"):
            return False
        raise
    return True


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--ddb-endpoint", default="http://localhost:8000")
    parser.add_argument("--s3-endpoint", default="http://localhost:4569")
    parser.add_argument("--region", default="us-east-1")
    parser.add_argument("--table", default=DEFAULT_SONGS_TABLE)
    parser.add_argument("--bucket", default=DEFAULT_UPLOAD_BUCKET)
    parser.add_argument("--songs-file", type=Path, default=DEFAULT_SONGS_FILE)
    parser.add_argument(
        "--skip-s3",
        action="store_true",
        help="Only prepare DynamoDB.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args(argv)

    ddb = _local_client("dynamodb", args.ddb_endpoint, args.region)
    if create_table(ddb, args.table):
        logger.info("Created table %s", args.table)
    else:
        logger.info("Table %s already exists", args.table)

    items = json.loads(args.songs_file.read_text(encoding="utf-8"))
    count = seed_table(ddb, args.table, items)
    logger.info("Seeded %d songs into %s", count, args.table)

    if args.skip_s3:
        return

    s3 = _local_client("s3", args.s3_endpoint, args.region)
    if create_bucket(s3, args.bucket):
        logger.info("Created bucket %s", args.bucket)
    else:
        logger.info("Bucket %s already exists", args.bucket)


if __name__ == "__main__":
    main()
