"""Endpoints del recurso `authentication`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.endpoints.base import build_path


class AuthenticationResource(str, Enum):
    VALIDATE_KEY = "validate_key"
    GUEST_SESSION = "guest_session"
    REQUEST_TOKEN = "request_token"


_PATHS: dict[AuthenticationResource, str] = {
    AuthenticationResource.VALIDATE_KEY: "/authentication",
    AuthenticationResource.GUEST_SESSION: "/authentication/guest_session/new",
    AuthenticationResource.REQUEST_TOKEN: "/authentication/token/new",
}


@dataclass(frozen=True)
class AuthenticationEndpoint:
    resource: AuthenticationResource

    @classmethod
    def validate_key(cls) -> "AuthenticationEndpoint":
        return cls(AuthenticationResource.VALIDATE_KEY)

    @classmethod
    def guest_session(cls) -> "AuthenticationEndpoint":
        return cls(AuthenticationResource.GUEST_SESSION)

    @classmethod
    def request_token(cls) -> "AuthenticationEndpoint":
        return cls(AuthenticationResource.REQUEST_TOKEN)

    @property
    def path(self) -> str:
        return build_path(_PATHS[self.resource])
