"""Endpoints del recurso `account`.

Variantes:
- details: datos de la cuenta asociada a una sesión.
- favourite_movies / favourite_tv_series: favoritos de la cuenta.
- movie_watchlist / tv_series_watchlist: watchlist de la cuenta.

Todas requieren `session_id` en el query string.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.domain.errors import EndpointURLError
from core.domain.models import FavouriteSort, Session
from core.endpoints.base import build_path, path_segment


class AccountResource(str, Enum):
    DETAILS = "details"
    FAVOURITE_MOVIES = "favourite_movies"
    FAVOURITE_TV_SERIES = "favourite_tv_series"
    MOVIE_WATCHLIST = "movie_watchlist"
    TV_SERIES_WATCHLIST = "tv_series_watchlist"


_LIST_SUFFIXES: dict[AccountResource, str] = {
    AccountResource.FAVOURITE_MOVIES: "favorite/movies",
    AccountResource.FAVOURITE_TV_SERIES: "favorite/tv",
    AccountResource.MOVIE_WATCHLIST: "watchlist/movies",
    AccountResource.TV_SERIES_WATCHLIST: "watchlist/tv",
}


@dataclass(frozen=True)
class AccountEndpoint:
    """Variante etiquetada (`resource`) con sus parámetros tipados."""

    resource: AccountResource
    session: Session
    account_id: int | None = None
    sorted_by: FavouriteSort | None = None
    page: int | None = None

    base_path = "/account"

    @classmethod
    def details(cls, session: Session) -> "AccountEndpoint":
        return cls(resource=AccountResource.DETAILS, session=session)

    @classmethod
    def favourite_movies(
        cls,
        account_id: int,
        session: Session,
        sorted_by: FavouriteSort | None = None,
        page: int | None = None,
    ) -> "AccountEndpoint":
        return cls(AccountResource.FAVOURITE_MOVIES, session, account_id, sorted_by, page)

    @classmethod
    def favourite_tv_series(
        cls,
        account_id: int,
        session: Session,
        sorted_by: FavouriteSort | None = None,
        page: int | None = None,
    ) -> "AccountEndpoint":
        return cls(AccountResource.FAVOURITE_TV_SERIES, session, account_id, sorted_by, page)

    @classmethod
    def movie_watchlist(
        cls,
        account_id: int,
        session: Session,
        sorted_by: FavouriteSort | None = None,
        page: int | None = None,
    ) -> "AccountEndpoint":
        return cls(AccountResource.MOVIE_WATCHLIST, session, account_id, sorted_by, page)

    @classmethod
    def tv_series_watchlist(
        cls,
        account_id: int,
        session: Session,
        sorted_by: FavouriteSort | None = None,
        page: int | None = None,
    ) -> "AccountEndpoint":
        return cls(AccountResource.TV_SERIES_WATCHLIST, session, account_id, sorted_by, page)

    @property
    def path(self) -> str:
        if self.resource is AccountResource.DETAILS:
            return build_path(self.base_path, [("session_id", self.session.session_id)])

        if self.account_id is None:
            raise EndpointURLError(f"{self.resource.value} requires an account id")
        path = f"{self.base_path}/{path_segment(self.account_id)}/{_LIST_SUFFIXES[self.resource]}"
        return build_path(
            path,
            [
                ("sort_by", self.sorted_by),
                ("page", self.page),
                ("session_id", self.session.session_id),
            ],
        )
