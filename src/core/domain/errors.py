"""Errores del dominio.

Dos familias:
- Construcción: `EndpointURLError` cuando un endpoint produce una URL inválida.
- Interpretación (opt-in): `TMDbAPIError` y subclases por status HTTP. El
  adaptador nunca las lanza; el llamador decide si usar `error_for_response`.

Los fallos de transporte no se modelan aquí: se propagan tal cual desde httpx.
"""

from __future__ import annotations

import json
from typing import Any

from core.domain.http import HTTPResponse


class EndpointURLError(ValueError):
    """Un endpoint no pudo construir un path/query válido."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TMDbAPIError(RuntimeError):
    """Base para respuestas no exitosas de la API de TMDb."""

    status: int | None = None

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        status_message: str | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        if status is not None:
            self.status = status
        self.status_message = status_message
        self.payload = payload


class BadRequestError(TMDbAPIError):
    status = 400


class UnauthorisedError(TMDbAPIError):
    status = 401


class ForbiddenError(TMDbAPIError):
    status = 403


class NotFoundError(TMDbAPIError):
    status = 404


class MethodNotAllowedError(TMDbAPIError):
    status = 405


class NotAcceptableError(TMDbAPIError):
    status = 406


class UnprocessableContentError(TMDbAPIError):
    status = 422


class TooManyRequestsError(TMDbAPIError):
    status = 429


class InternalServerError(TMDbAPIError):
    status = 500


class NotImplementedServerError(TMDbAPIError):
    status = 501


class BadGatewayError(TMDbAPIError):
    status = 502


class ServiceUnavailableError(TMDbAPIError):
    status = 503


class GatewayTimeoutError(TMDbAPIError):
    status = 504


class UnknownStatusError(TMDbAPIError):
    """Status no exitoso sin mapeo específico."""


_ERRORS_BY_STATUS: dict[int, type[TMDbAPIError]] = {
    cls.status: cls
    for cls in (
        BadRequestError,
        UnauthorisedError,
        ForbiddenError,
        NotFoundError,
        MethodNotAllowedError,
        NotAcceptableError,
        UnprocessableContentError,
        TooManyRequestsError,
        InternalServerError,
        NotImplementedServerError,
        BadGatewayError,
        ServiceUnavailableError,
        GatewayTimeoutError,
    )
    if cls.status is not None
}


def parse_error_payload(data: bytes) -> Any:
    """Best-effort extraction of the error body without raising."""

    if not data:
        return None
    try:
        return json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        text = data.decode("utf-8", errors="replace").strip()
        return text[:400] or None


def extract_status_message(payload: Any) -> str | None:
    """TMDb reporta errores como {"status_code": 34, "status_message": "..."}."""

    if isinstance(payload, dict):
        value = payload.get("status_message")
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def error_for_response(response: HTTPResponse) -> TMDbAPIError | None:
    """Mapea una respuesta a su error tipado, o `None` si es 2xx."""

    if response.is_success:
        return None

    payload = parse_error_payload(response.data)
    status_message = extract_status_message(payload)
    error_cls = _ERRORS_BY_STATUS.get(response.status_code, UnknownStatusError)

    message = f"TMDb API: HTTP {response.status_code}"
    if status_message:
        message = f"TMDb API: {status_message} (HTTP {response.status_code})"

    return error_cls(
        message,
        status=response.status_code,
        status_message=status_message,
        payload=payload,
    )
