from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pronotepy
from logprise import logger
from pronotepy.exceptions import PronoteAPIError
from requests import RequestException

from .exceptions import PronoteAuthenticationError

if TYPE_CHECKING:
    from .accounts import Account
    from .cache import TtlCaches

__all__ = ["PronoteSession", "SessionMixin"]

DEVICE_PREFIX = "pronote-bridge-"


def _device_uuid() -> str:
    return DEVICE_PREFIX + secrets.token_hex(4)


@dataclass
class PronoteSession:
    """
    Hands out the authenticated Pronote client for one account.

    The client is kept in `caches.sessions` and reused until that entry expires, after which the next access logs in again.

    Example:
    -------
    >>> session = PronoteSession(account, caches)
    >>> session.client.info.name
    'DUPONT Marie'

    """

    account: Account
    caches: TtlCaches

    @property
    def username(self) -> str:
        return self.account.username

    @property
    def client(self) -> pronotepy.Client:
        cached = self.caches.sessions.get(self.username)
        if cached is not None:
            return cached

        client = self._login()
        self.caches.sessions[self.username] = client
        return client

    def _login(self) -> pronotepy.Client:
        logger.info(f"Logging in with {self.username} on {self.account.url}")

        try:
            client = pronotepy.Client(
                self.account.url,
                username=self.account.username,
                password=self.account.password,
                uuid=_device_uuid(),
            )
        except (PronoteAPIError, RequestException) as e:
            raise PronoteAuthenticationError(f"Login failed for {self.username}: {e}") from e

        if not client.logged_in:
            raise PronoteAuthenticationError(f"Login failed for {self.username}")

        return client

    def logout(self) -> None:
        """Forgets the cached client, the next access will log in again."""
        self.caches.sessions.pop(self.username, None)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(for: {self.username})"


@dataclass
class SessionMixin:
    session: PronoteSession
