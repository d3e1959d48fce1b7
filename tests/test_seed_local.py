"""Tests for the local emulator seeding script."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))
sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'scripts'))

import seed_local  # noqa: E402


class TestCreateTable:
    """Tests for create_table."""

    def test_creates_music_schema(self) -> None:
        client = MagicMock()
        assert seed_local.create_table(client, 'Music') is True
        kwargs = client.create_table.call_args.kwargs
        assert kwargs['TableName'] == 'Music'
        assert kwargs['KeySchema'] == [
            {'AttributeName': 'Artist', 'KeyType': 'HASH'},
            {'AttributeName': 'SongTitle', 'KeyType': 'RANGE'},
        ]
        assert kwargs['BillingMode'] == 'PAY_PER_REQUEST'

    def test_existing_table_is_not_an_error(self, client_error) -> None:
        client = MagicMock()
        client.create_table.side_effect = client_error('ResourceInUseException', 'CreateTable')
        assert seed_local.create_table(client, 'Music') is False

    def test_other_errors_propagate(self, client_error) -> None:
        client = MagicMock()
        client.create_table.side_effect = client_error('AccessDenied', 'CreateTable')
        with pytest.raises(ClientError):
            seed_local.create_table(client, 'Music')


class TestCreateBucket:
    """Tests for create_bucket."""

    def test_creates_bucket(self) -> None:
        client = MagicMock()
        assert seed_local.create_bucket(client, 'local-bucket') is True
        client.create_bucket.assert_called_once_with(Bucket='local-bucket')

    def test_existing_bucket(self, client_error) -> None:
        client = MagicMock()
        client.create_bucket.side_effect = client_error('BucketAlreadyOwnedByYou', 'CreateBucket')
        assert seed_local.create_bucket(client, 'local-bucket') is False


class TestMain:
    """Tests for the script entrypoint."""

    def test_seeds_bundled_songs(self, mock_boto3_client) -> None:
        seed_local.main(['--skip-s3'])

        mock_boto3_client.assert_called_once_with(
            'dynamodb',
            aws_access_key_id=seed_local.LOCAL_ACCESS_KEY_ID,
            aws_secret_access_key=seed_local.LOCAL_SECRET_ACCESS_KEY,
            region_name='us-east-1',
            endpoint_url='http://localhost:8000',
        )
        client = mock_boto3_client.return_value
        songs = json.loads(seed_local.DEFAULT_SONGS_FILE.read_text(encoding='utf-8'))
        assert client.put_item.call_count == len(songs)

    def test_prepares_bucket(self, mock_boto3_client) -> None:
        seed_local.main(['--bucket', 'other'])
        mock_boto3_client.return_value.create_bucket.assert_called_once_with(Bucket='other')
