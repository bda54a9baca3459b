from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from core.config import AppSettings

FIXTURES = Path(__file__).resolve().parent / "fixtures"


class RecordingTransport(httpx.MockTransport):
    """MockTransport que recuerda cada request recibida."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request | None:
        return self.requests[-1] if self.requests else None


@pytest.fixture
def settings() -> AppSettings:
    # _env_file=None: los tests no deben leer el .env del desarrollador.
    return AppSettings(_env_file=None, api_key=None, access_token=None)


@pytest.fixture
def load_fixture() -> Callable[[str], bytes]:
    def _load(name: str) -> bytes:
        return (FIXTURES / name).read_bytes()

    return _load
