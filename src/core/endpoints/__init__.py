"""Endpoints de la API de TMDb.

Cada módulo agrupa las variantes de un recurso (account, authentication...)
y calcula su `path` relativo a la base URL configurada.
"""

from core.endpoints.account import AccountEndpoint
from core.endpoints.authentication import AuthenticationEndpoint
from core.endpoints.base import Endpoint, build_path

__all__ = [
    "AccountEndpoint",
    "AuthenticationEndpoint",
    "Endpoint",
    "build_path",
]
