"""Valores HTTP del dominio.

Por qué aquí:
- El Core describe *qué* se pide y *qué* se recibe sin conocer httpx.
- Los adaptadores traducen estos valores hacia/desde la librería de red.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic.config import ConfigDict


class HTTPRequest(BaseModel):
    """Petición abstracta: URL absoluta + headers.

    Inmutable: se construye por llamada y no tiene ciclo de vida propio.
    Los headers se guardan como `MappingProxyType` (solo lectura).
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        min_length=1,
        description="URL completa (incluye query string) a solicitar.",
    )
    headers: Mapping[str, str] = Field(
        default_factory=dict,
        description="Headers a enviar tal cual (nombre -> valor).",
    )

    @field_validator("headers", mode="after")
    @classmethod
    def _freeze_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("headers")
    def _dump_headers(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)


class HTTPResponse(BaseModel):
    """Respuesta normalizada: status code + payload crudo.

    Nota:
    - Cualquier status que entregue el servidor es una respuesta válida
      (incluidos códigos no estándar); interpretarlo es cosa del llamador.
    """

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(
        ...,
        description="Código de estado HTTP devuelto por el servidor.",
    )
    data: bytes = Field(
        default=b"",
        description="Cuerpo de la respuesta sin decodificar.",
    )

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
