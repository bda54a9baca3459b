"""Cliente de la API de TMDb.

Une la base URL configurada con el `path` de un endpoint, añade credenciales
y delega la llamada en un `HTTPClient`. No decodifica ni clasifica status:
eso queda en manos del llamador (ver `core.domain.errors.error_for_response`).
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings
from core.domain.http import HTTPRequest, HTTPResponse
from core.endpoints.base import Endpoint
from core.interfaces.http_client import HTTPClient

logger = logging.getLogger(__name__)


class TMDbAPIClient:
    def __init__(self, http_client: HTTPClient, settings: AppSettings | None = None) -> None:
        self._http_client = http_client
        self._settings = settings or AppSettings()

    def build_request(self, endpoint: Endpoint) -> HTTPRequest:
        url = self._settings.api_base_url.rstrip("/") + endpoint.path

        headers = {"Accept": "application/json"}
        if self._settings.access_token:
            headers["Authorization"] = f"Bearer {self._settings.access_token}"
        elif self._settings.api_key:
            url = str(httpx.URL(url).copy_add_param("api_key", self._settings.api_key))
        else:
            logger.debug("No TMDb credentials configured; sending %s unauthenticated", endpoint.path)

        return HTTPRequest(url=url, headers=headers)

    async def get(self, endpoint: Endpoint) -> HTTPResponse:
        """Ejecuta `endpoint` y devuelve la respuesta cruda (cualquier status)."""

        return await self._http_client.perform(self.build_request(endpoint))
