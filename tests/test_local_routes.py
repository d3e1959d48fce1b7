"""Tests for local API Gateway routing."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1] / 'backend' / 'src'))

from lambdakit.local.routes import Route, Router, compile_path  # noqa: E402


class TestCompilePath:
    """Tests for compile_path."""

    def test_static_path(self) -> None:
        regex, names = compile_path('/hello')
        assert names == []
        assert regex.match('/hello')
        assert regex.match('/hello/')
        assert not regex.match('/hello/world')

    def test_root(self) -> None:
        regex, _ = compile_path('/')
        assert regex.match('/')
        assert not regex.match('/x')

    def test_parameter_captures_one_segment(self) -> None:
        regex, names = compile_path('/items/{id}')
        assert names == ['id']
        assert regex.match('/items/42').groups() == ('42',)
        assert not regex.match('/items/42/extra')
        assert not regex.match('/items/')

    def test_greedy_parameter(self) -> None:
        regex, names = compile_path('/files/{proxy+}')
        assert names == ['proxy']
        assert regex.match('/files/a/b/c').groups() == ('a/b/c',)

    def test_static_segments_are_escaped(self) -> None:
        regex, _ = compile_path('/v1.0/items')
        assert regex.match('/v1.0/items')
        assert not regex.match('/v1x0/items')


class TestRoute:
    """Tests for Route."""

    def test_method_is_normalized(self) -> None:
        assert Route('get', '/').method == 'GET'

    def test_unsupported_method(self) -> None:
        with pytest.raises(ValueError):
            Route('TRACE', '/')

    def test_path_parameters(self) -> None:
        route = Route('GET', '/users/{userId}/posts/{postId}')
        assert route.parameter_names == ['userId', 'postId']
        assert route.path_parameters('/users/7/posts/9') == {'userId': '7', 'postId': '9'}

    def test_path_parameters_without_match(self) -> None:
        assert Route('GET', '/items/{id}').path_parameters('/other') == {}

    def test_validate_required_parameters(self) -> None:
        route = Route(
            'GET',
            '/search',
            query_params={'q': True, 'page': False},
            header_params={'X-Api-Key': True},
        )
        assert route.validate({'q': 'x'}, {'x-api-key': 'k'}) == []
        assert route.validate({}, {}) == [
            'query parameter "q" is required',
            'header parameter "X-Api-Key" is required',
        ]

    def test_blank_query_value_counts_as_present(self) -> None:
        route = Route('GET', '/search', query_params={'q': True})
        assert route.validate({'q': ''}, {}) == []


class TestRouter:
    """Tests for Router."""

    def test_finds_first_matching_route(self) -> None:
        router = Router()
        specific = Route('GET', '/items/latest')
        generic = Route('GET', '/items/{id}')
        router.add(specific)
        router.add(generic)
        assert router.find('GET', '/items/latest') is specific
        assert router.find('get', '/items/3') is generic

    def test_method_must_match(self) -> None:
        router = Router()
        router.add(Route('POST', '/hello'))
        assert router.find('GET', '/hello') is None

    def test_has_routes(self) -> None:
        router = Router()
        assert not router.has_routes()
        router.add(Route('DELETE', '/x'))
        assert router.has_routes()
        assert len(router.all_routes()) == 1

    def test_unsupported_method(self) -> None:
        with pytest.raises(ValueError):
            Router().find('TRACE', '/')
