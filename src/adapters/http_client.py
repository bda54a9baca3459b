"""Adaptador HTTP sobre httpx.

Por qué un wrapper:
- Traduce `HTTPRequest`/`HTTPResponse` (Core) hacia/desde httpx.
- Estandariza timeouts y User-Agent en un único builder.
- Sin redirects automáticos: una invocación = una llamada de red.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.http import HTTPRequest, HTTPResponse
from core.interfaces.http_client import HTTPClient

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que todas las llamadas se comporten igual.
    - `transport` permite enchufar un `httpx.MockTransport` en tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
        transport=transport,
    )


class HTTPXClientAdapter(HTTPClient):
    """Implementa `HTTPClient` con una única llamada GET por invocación.

    Reglas:
    - No clasifica status codes: 2xx-5xx se devuelven como `HTTPResponse`.
    - Sin reintentos ni caché.
    - Errores de transporte (`httpx.TransportError`) se propagan sin envolver.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings

    async def perform(self, request: HTTPRequest) -> HTTPResponse:
        if self._client is not None:
            return await self._send(self._client, request)

        # Sin cliente inyectado: uno por llamada, cerrado al terminar.
        async with build_async_client(self._settings) as client:
            return await self._send(client, request)

    async def _send(self, client: httpx.AsyncClient, request: HTTPRequest) -> HTTPResponse:
        url = httpx.URL(request.url)
        logger.debug("GET %s", _redact(url))
        try:
            resp = await client.get(url, headers=request.headers)
        except httpx.TransportError as exc:
            logger.warning("GET %s failed: %s", _redact(url), exc)
            raise

        logger.debug("GET %s -> HTTP %s (%d bytes)", _redact(url), resp.status_code, len(resp.content))
        return HTTPResponse(status_code=resp.status_code, data=resp.content)


def _redact(url: httpx.URL) -> str:
    # El api_key viaja en el query string; no debe acabar en los logs.
    if "api_key" not in url.params:
        return str(url)
    return str(url.copy_set_param("api_key", "***"))
