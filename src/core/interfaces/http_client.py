"""Contrato del cliente HTTP.

Por qué Protocol:
- El Core (servicios, endpoints) depende de esta abstracción, no de httpx.
- Permite sustituir el transporte en tests por un stub sin herencia.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.http import HTTPRequest, HTTPResponse


@runtime_checkable
class HTTPClient(Protocol):
    """Contrato mínimo para ejecutar una petición.

    Reglas de diseño:
    - `perform` es asíncrono: una única llamada de red por invocación.
    - Todo status HTTP se devuelve como `HTTPResponse`; solo los fallos de
      transporte se propagan como excepción.
    """

    async def perform(self, request: HTTPRequest) -> HTTPResponse:
        """Ejecuta `request` y devuelve la respuesta normalizada."""

        ...
