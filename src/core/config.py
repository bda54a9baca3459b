"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP) y servicios lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tmdb-kit"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tmdb-kit"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tmdb-kit"
    return Path.home() / ".config" / "tmdb-kit"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Usa `dotenv.set_key`: conserva el resto de claves y comentarios del fichero.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    if not env_path.exists():
        env_path.write_text("# tmdb-kit user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is None:
            continue
        set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters/servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="https://api.themoviedb.org/3",
        min_length=8,
        description="Base URL de la API v3 de TMDb (sin '/' final).",
    )
    api_key: str | None = Field(
        default=None,
        description="API key v3; se envía como query param `api_key` si no hay token.",
    )
    access_token: str | None = Field(
        default=None,
        description="API Read Access Token (v4); se envía como `Authorization: Bearer`.",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="tmdb-kit/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging por defecto (DEBUG, INFO, WARNING...).",
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.access_token or self.api_key)
