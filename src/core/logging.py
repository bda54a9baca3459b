"""Configuración de logging (stdlib).

Los módulos usan `logging.getLogger(__name__)`; este módulo solo configura el
root logger una vez, con overrides por entorno:
  - TMDB_LOG_LEVEL: nivel explícito
  - TMDB_DEBUG: truthy -> DEBUG
"""

from __future__ import annotations

import logging
import os

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VAR = "TMDB_LOG_LEVEL"
_DEBUG_FLAG = "TMDB_DEBUG"


def coerce_level(value: str | int | None, fallback: int = logging.INFO) -> int:
    if value is None:
        return fallback
    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = getattr(logging, text.upper(), None)
    if isinstance(candidate, int):
        return candidate
    return fallback


def _env_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def resolve_env_level() -> int | None:
    value = os.getenv(_LEVEL_ENV_VAR)
    if value:
        return coerce_level(value)
    if _env_truthy(os.getenv(_DEBUG_FLAG)):
        return logging.DEBUG
    return None


def configure_logging(default_level: int | str = logging.INFO) -> int:
    """Configura el root logger con un formato compacto.

    Devuelve el nivel efectivo (el entorno tiene prioridad sobre `default_level`).
    """

    effective = resolve_env_level() or coerce_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(effective)
    # httpx registra cada request en INFO; lo dejamos en WARNING salvo debug.
    logging.getLogger("httpx").setLevel(logging.DEBUG if effective <= logging.DEBUG else logging.WARNING)
    return effective
