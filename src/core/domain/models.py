"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Los endpoints reciben parámetros tipados (sesión, orden) y no strings sueltos.
- `extra="ignore"` permite poblar los modelos directamente desde el JSON de TMDb.

Nota:
- Decodificar películas/series/cuentas no es responsabilidad de este paquete;
  aquí solo viven los modelos que los endpoints necesitan como parámetros.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Session(BaseModel):
    """Sesión de usuario autenticada en TMDb.

    Ejemplo de payload (`/authentication/session/new`):
    {"success": true, "session_id": "79191836ddaa0da3df76a5ffef6f07ad6ab0c641"}
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    success: bool = Field(
        ...,
        description="Indica si TMDb creó la sesión correctamente.",
    )
    session_id: str = Field(
        ...,
        min_length=1,
        description="Identificador de sesión usado en el query string.",
    )


class FavouriteSort(str, Enum):
    """Orden soportado por los listados de favoritos y watchlist."""

    CREATED_AT_ASCENDING = "created_at.asc"
    CREATED_AT_DESCENDING = "created_at.desc"
