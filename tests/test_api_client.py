from __future__ import annotations

import asyncio

import httpx

from adapters.http_client import HTTPXClientAdapter, build_async_client
from conftest import RecordingTransport
from core.config import AppSettings
from core.domain.http import HTTPRequest, HTTPResponse
from core.domain.models import Session
from core.endpoints import AccountEndpoint, AuthenticationEndpoint
from core.services.api_client import TMDbAPIClient


class StubHTTPClient:
    def __init__(self, response: HTTPResponse) -> None:
        self.response = response
        self.requests: list[HTTPRequest] = []

    async def perform(self, request: HTTPRequest) -> HTTPResponse:
        self.requests.append(request)
        return self.response


def test_build_request_joins_base_url_and_endpoint_path(settings: AppSettings) -> None:
    client = TMDbAPIClient(StubHTTPClient(HTTPResponse(status_code=200)), settings)
    session = Session(success=True, session_id="abc123")

    request = client.build_request(AccountEndpoint.details(session))

    assert request.url == "https://api.themoviedb.org/3/account?session_id=abc123"
    assert request.headers == {"Accept": "application/json"}


def test_build_request_strips_trailing_slash_from_base_url() -> None:
    settings = AppSettings(_env_file=None, api_base_url="https://example.org/3/", api_key=None, access_token=None)
    client = TMDbAPIClient(StubHTTPClient(HTTPResponse(status_code=200)), settings)

    request = client.build_request(AuthenticationEndpoint.validate_key())

    assert request.url == "https://example.org/3/authentication"


def test_build_request_prefers_access_token_header() -> None:
    settings = AppSettings(_env_file=None, access_token="token-v4", api_key="key-v3")
    client = TMDbAPIClient(StubHTTPClient(HTTPResponse(status_code=200)), settings)

    request = client.build_request(AuthenticationEndpoint.validate_key())

    assert request.headers["Authorization"] == "Bearer token-v4"
    assert "api_key" not in request.url


def test_build_request_appends_api_key_after_endpoint_query() -> None:
    settings = AppSettings(_env_file=None, api_key="key-v3", access_token=None)
    client = TMDbAPIClient(StubHTTPClient(HTTPResponse(status_code=200)), settings)
    session = Session(success=True, session_id="abc123")

    request = client.build_request(AccountEndpoint.details(session))

    assert request.url == "https://api.themoviedb.org/3/account?session_id=abc123&api_key=key-v3"
    assert "Authorization" not in request.headers


def test_get_returns_error_responses_without_raising(settings: AppSettings) -> None:
    stub = StubHTTPClient(HTTPResponse(status_code=401))
    client = TMDbAPIClient(stub, settings)

    response = asyncio.run(client.get(AuthenticationEndpoint.guest_session()))

    assert response.status_code == 401
    assert len(stub.requests) == 1


def test_get_through_httpx_adapter_hits_expected_url() -> None:
    settings = AppSettings(_env_file=None, access_token="token-v4", api_key=None)
    transport = RecordingTransport(lambda request: httpx.Response(200, content=b'{"success":true}'))
    adapter = HTTPXClientAdapter(client=build_async_client(settings, transport=transport))
    client = TMDbAPIClient(adapter, settings)

    response = asyncio.run(client.get(AuthenticationEndpoint.request_token()))

    sent = transport.last_request
    assert sent is not None
    assert str(sent.url) == "https://api.themoviedb.org/3/authentication/token/new"
    assert sent.headers["Authorization"] == "Bearer token-v4"
    assert sent.headers["Accept"] == "application/json"
    assert response.status_code == 200
    assert response.data == b'{"success":true}'
