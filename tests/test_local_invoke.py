"""Tests for in-process local invocation."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from lambdakit.local.functions import (  # noqa: E402
    FUNCTIONS,
    FunctionDef,
    build_router,
    get_function,
)
from lambdakit.local.invoke import invoke_function, invoke_http  # noqa: E402
from lambdakit.local.routes import Route, Router  # noqa: E402


class TestRegistry:
    """Tests for the function registry."""

    def test_http_functions_have_routes(self) -> None:
        assert FUNCTIONS['item'].is_http
        assert not FUNCTIONS['songs'].is_http

    def test_unknown_function(self) -> None:
        with pytest.raises(KeyError):
            get_function('missing')

    def test_router_covers_http_functions(self) -> None:
        router, owners = build_router()
        route = router.find('GET', '/items/1')
        assert route is not None
        assert owners[id(route)].name == 'item'


class TestInvokeFunction:
    """Tests for invoke_function."""

    def test_generic_function(self) -> None:
        assert invoke_function('last', {'lastName': 'Lovelace'}) == {
            'message': 'Hi, Lovelace!'
        }

    def test_songs_without_artist_makes_no_call(self, mock_boto3_client) -> None:
        assert invoke_function('songs', {}) == []
        mock_boto3_client.assert_not_called()


class TestInvokeHttp:
    """Tests for invoke_http."""

    def test_path_parameter(self) -> None:
        response = invoke_http('GET', '/items/42')
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'id': 42}

    def test_path_greeting(self) -> None:
        response = invoke_http('GET', '/hello/Ada')
        assert json.loads(response['body']) == {'message': 'Hi, Ada!'}

    def test_json_body(self) -> None:
        response = invoke_http(
            'POST',
            '/hello',
            headers={'Content-Type': 'application/json'},
            body='{"firstName": "Ada", "lastName": "Lovelace"}',
        )
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'message': 'Hi, Ada Lovelace!'}

    def test_handler_400_passes_through(self) -> None:
        response = invoke_http('GET', '/items/abc')
        assert response['statusCode'] == 400

    def test_unknown_route(self) -> None:
        response = invoke_http('GET', '/nowhere')
        assert response['statusCode'] == 404
        assert response['headers']['Content-Type'] == 'application/json'
        assert json.loads(response['body']) == {'message': 'No route for GET /nowhere'}


class TestRequiredParameters:
    """Tests for required query parameters on proxied routes."""

    @pytest.fixture
    def search_router(self, monkeypatch):
        route = Route('GET', '/search', query_params={'q': True})
        fn = FunctionDef(
            'search',
            lambda event, context: {
                'statusCode': 200,
                'headers': {'Content-Type': 'application/json'},
                'body': json.dumps(event['queryStringParameters']),
            },
            (route,),
        )
        router = Router()
        router.add(route)
        monkeypatch.setattr(
            'lambdakit.local.invoke.build_router',
            lambda: (router, {id(route): fn}),
        )
        return router

    def test_missing_parameter_is_rejected(self, search_router) -> None:
        response = invoke_http('GET', '/search')
        assert response['statusCode'] == 400
        assert json.loads(response['body']) == {
            'message': 'query parameter "q" is required'
        }

    def test_blank_parameter_is_forwarded(self, search_router) -> None:
        response = invoke_http('GET', '/search?q=')
        assert response['statusCode'] == 200
        assert json.loads(response['body']) == {'q': ''}
