"""Pytest configuration and fixtures for handler tests.

This module provides shared fixtures: a clean process environment, API
Gateway event factories, a fake Lambda context and boto3 client mocks.
"""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Generator
from uuid import uuid4

import pytest

# Add backend source to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

_CONFIG_VARS = (
    'ENV',
    'AWS_REGION',
    'AWS_DEFAULT_REGION',
    'DDB_LOCAL_ENDPOINT',
    'S3_LOCAL_ENDPOINT',
    'SONGS_TABLE_NAME',
    'UPLOAD_BUCKET_NAME',
    'UPLOAD_OBJECT_KEY',
    'GREETING',
    'STATUS',
    'READ_ERROR_POLICY',
)


# --- Environment Fixtures ---


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch) -> Generator:
    """Start every test from an unset configuration and empty caches."""
    from lambdakit.config import clear_settings_cache
    from lambdakit.services.aws_clients import clear_client_cache
    from lambdakit.utils.logging import clear_request_context

    for name in _CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    clear_client_cache()

    yield

    clear_settings_cache()
    clear_client_cache()
    clear_request_context()


@pytest.fixture
def settings():
    """Production settings with every default."""
    from lambdakit.config import load_settings

    return load_settings({})


@pytest.fixture
def local_settings():
    """Settings resolved with the local-mode sentinel."""
    from lambdakit.config import load_settings

    return load_settings({'ENV': 'local'})


# --- API Event Fixtures ---


@pytest.fixture
def api_gateway_event() -> dict:
    """Base API Gateway event structure."""
    return {
        'resource': '/',
        'httpMethod': 'GET',
        'path': '/',
        'queryStringParameters': None,
        'multiValueQueryStringParameters': None,
        'pathParameters': None,
        'headers': {},
        'requestContext': {
            'requestId': str(uuid4()),
            'authorizer': {},
        },
        'body': None,
        'isBase64Encoded': False,
    }


@pytest.fixture
def make_event(api_gateway_event):
    """Factory for API Gateway events with path parameters and a body."""

    def _make(path_parameters=None, body=None, method='GET', **overrides) -> dict:
        event = dict(api_gateway_event)
        event['httpMethod'] = method
        event['pathParameters'] = path_parameters
        event['body'] = body
        event.update(overrides)
        return event

    return _make


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    """Minimal stand-in for the Lambda context object."""
    return SimpleNamespace(
        function_name='test-function',
        aws_request_id=str(uuid4()),
    )


# --- Mock Fixtures ---


@pytest.fixture
def mock_boto3_client(mocker):
    """Mock boto3 client for AWS service calls."""
    mock = mocker.patch('boto3.client')
    return mock


@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""
    from botocore.exceptions import ClientError

    def _make(code: str = 'ResourceNotFoundException', operation: str = 'Query'):
        return ClientError(
            {'Error': {'Code': code, 'Message': f'{code} raised'}},
            operation,
        )

    return _make
