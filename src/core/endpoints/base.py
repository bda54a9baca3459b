"""Utilidades comunes para construir paths de endpoints.

Reglas:
- Funciones puras: sin I/O.
- Query string en el orden en que se declaran los pares (determinista).
- Pares con valor `None` se omiten (parámetros opcionales).
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Protocol, runtime_checkable
from urllib.parse import quote, urlencode

import httpx

from core.domain.errors import EndpointURLError

QueryValue = str | int | bool | Enum | None


@runtime_checkable
class Endpoint(Protocol):
    """Un recurso de la API que sabe calcular su path (con query string)."""

    @property
    def path(self) -> str: ...


def path_segment(value: str | int) -> str:
    """Codifica un segmento dinámico (p.ej. account id) para el path."""

    text = str(value)
    if not text:
        raise EndpointURLError("Empty path segment")
    return quote(text, safe="")


def _query_text(value: str | int | bool | Enum) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_path(path: str, query: Iterable[tuple[str, QueryValue]] = ()) -> str:
    """Une `path` con los pares de `query` codificados.

    Raises:
        EndpointURLError: si el resultado no es una URL relativa válida.
    """

    if not path.startswith("/"):
        raise EndpointURLError(f"Endpoint path must start with '/': {path!r}", path=path)
    if any(ch.isspace() or ord(ch) < 0x20 for ch in path):
        raise EndpointURLError(f"Endpoint path contains invalid characters: {path!r}", path=path)

    pairs = [(name, _query_text(value)) for name, value in query if value is not None]
    result = path
    if pairs:
        result = f"{path}?{urlencode(pairs, quote_via=quote, safe='')}"

    try:
        httpx.URL(result)
    except httpx.InvalidURL as exc:
        raise EndpointURLError(f"Invalid endpoint URL: {exc}", path=result) from exc
    return result
