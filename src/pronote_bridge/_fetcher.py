from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from logprise import logger
from pronotepy.exceptions import PronoteAPIError
from requests import RequestException

from .session import SessionMixin

if TYPE_CHECKING:
    import pronotepy
    from cachetools import TTLCache

_T = TypeVar("_T")

# What the client library raises when a call to the portal goes wrong.
FETCH_ERRORS = (PronoteAPIError, RequestException)


class CachedFetcher(ABC, SessionMixin, Generic[_T]):
    def get(self) -> _T:
        """
        Retrieve the data for the session's user.

        A cached value is returned as-is. When the portal call fails, the empty value is returned and nothing gets cached,
        so the next call tries again. A portal error also drops the session, that next call logs in anew.
        """
        username = self.session.username

        cached = self._cache.get(username)
        if cached is not None:
            logger.debug(f"Cache hit for {self._name} of {username}")
            return cached

        try:
            raw = self._fetch(self.session.client)
        except FETCH_ERRORS as e:
            logger.warning(f"Failed to retrieve {self._name} for {username}: {e}")
            if isinstance(e, PronoteAPIError):
                # Most likely an expired session on the portal side.
                self.session.logout()
            return self._empty()

        result = self._convert(raw)
        self._cache[username] = result

        return result

    @property
    def _name(self) -> str:
        return self.__class__.__name__.lower()

    @property
    @abstractmethod
    def _cache(self) -> TTLCache:
        """The cache this data lives in."""

    @abstractmethod
    def _fetch(self, client: pronotepy.Client) -> object:
        """Calls the client library. Can raise any of `FETCH_ERRORS`."""

    @abstractmethod
    def _convert(self, raw: object) -> _T:
        """Reshapes what the client library returned into our own objects."""

    @abstractmethod
    def _empty(self) -> _T:
        """What to return when the portal call failed."""


class CachedListFetcher(CachedFetcher[list[_T]], ABC):
    def __iter__(self):
        yield from self.get()

    def _empty(self) -> list[_T]:
        return []
