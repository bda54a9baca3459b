from __future__ import annotations

import pytest

from core.domain.errors import EndpointURLError
from core.domain.models import FavouriteSort
from core.endpoints import AuthenticationEndpoint, build_path
from core.endpoints.base import path_segment


def test_build_path_without_query_returns_path() -> None:
    assert build_path("/configuration") == "/configuration"


def test_build_path_skips_none_values_and_keeps_order() -> None:
    path = build_path("/search/movie", [("query", "alien"), ("year", None), ("page", 1)])

    assert path == "/search/movie?query=alien&page=1"


def test_build_path_renders_enums_and_booleans() -> None:
    path = build_path(
        "/discover/movie",
        [("sort_by", FavouriteSort.CREATED_AT_ASCENDING), ("include_adult", False)],
    )

    assert path == "/discover/movie?sort_by=created_at.asc&include_adult=false"


@pytest.mark.parametrize("path", ["", "account", "/acc ount", "/account\n"])
def test_build_path_rejects_malformed_paths(path: str) -> None:
    with pytest.raises(EndpointURLError):
        build_path(path)


def test_path_segment_encodes_reserved_characters() -> None:
    assert path_segment("a/b") == "a%2Fb"


def test_path_segment_rejects_empty_value() -> None:
    with pytest.raises(EndpointURLError):
        path_segment("")


@pytest.mark.parametrize(
    ("endpoint", "expected"),
    [
        (AuthenticationEndpoint.validate_key(), "/authentication"),
        (AuthenticationEndpoint.guest_session(), "/authentication/guest_session/new"),
        (AuthenticationEndpoint.request_token(), "/authentication/token/new"),
    ],
)
def test_authentication_endpoint_paths(endpoint: AuthenticationEndpoint, expected: str) -> None:
    assert endpoint.path == expected
