from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Final

import yaml
from pydantic import AliasChoices, PositiveInt, ValidationError, constr
from pydantic.dataclasses import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from .accounts import Account, AppAccount
from .exceptions import PronoteConfigError

__all__ = ["AppConfig", "Config", "PathConfig"]

DEFAULT_REFRESH_EVERY: Final[int] = 5 * 60
DEFAULT_ACCOUNT_TIMEOUT: Final[int] = 10 * 60
DEFAULT_GOOGLE_CREDENTIALS: Final[str] = "google-credentials.json"

# Cached data disappears 30 seconds before the next refresh.
CACHE_MARGIN: Final[int] = 30
# Sessions are dropped 2 minutes before the portal expires them.
SESSION_MARGIN: Final[int] = 2 * 60

String = constr(strip_whitespace=True)


class Config:
    accounts: list[Account] = ()
    refresh_every: int = DEFAULT_REFRESH_EVERY
    account_timeout: int = DEFAULT_ACCOUNT_TIMEOUT
    task_list_id: str | None = None
    google_credentials: Path = Path(DEFAULT_GOOGLE_CREDENTIALS)

    @property
    def cache_ttl(self) -> int:
        return self.refresh_every - CACHE_MARGIN

    @property
    def session_ttl(self) -> int:
        return self.account_timeout - SESSION_MARGIN

    def validate(self) -> None:
        if self.cache_ttl <= 0:
            raise PronoteConfigError(f"refresh_every must be more than {CACHE_MARGIN} seconds, got {self.refresh_every}")
        if self.session_ttl <= 0:
            raise PronoteConfigError(f"account_timeout must be more than {SESSION_MARGIN} seconds, got {self.account_timeout}")

        for account in self.accounts:
            try:
                account.validate()
            except RuntimeError as e:
                raise PronoteConfigError(f"Account {account.username!r}: {e}") from e


@pydantic_dataclass
class _AccountEntry:
    username: String
    password: String
    url: String


@pydantic_dataclass
class _ConfigFile:
    """What a configuration file may contain. The camelCase spellings are accepted as well."""

    accounts: list[_AccountEntry] = Field(default_factory=list)
    refresh_every: PositiveInt = Field(default=DEFAULT_REFRESH_EVERY, validation_alias=AliasChoices("refresh_every", "refreshEvery"))
    account_timeout: PositiveInt = Field(default=DEFAULT_ACCOUNT_TIMEOUT, validation_alias=AliasChoices("account_timeout", "accountTimeout"))
    task_list_id: String | None = Field(default=None, validation_alias=AliasChoices("task_list_id", "taskListId"))
    google_credentials: String = Field(default=DEFAULT_GOOGLE_CREDENTIALS, validation_alias=AliasChoices("google_credentials", "googleCredentials"))


@dataclass(frozen=True)
class AppConfig(Config):
    accounts: list[Account] = field(default_factory=list)
    refresh_every: int = DEFAULT_REFRESH_EVERY
    account_timeout: int = DEFAULT_ACCOUNT_TIMEOUT
    task_list_id: str | None = None
    google_credentials: Path = Path(DEFAULT_GOOGLE_CREDENTIALS)


@dataclass(frozen=True)
class PathConfig(Config):
    CONFIG_FILENAME: ClassVar[str] = "config.yml"
    filename: str | Path = ""

    def __post_init__(self):
        object.__setattr__(self, "filename", self._find_config_file())

        try:
            raw = yaml.safe_load(self.filename.read_text(encoding="utf8")) or {}
        except yaml.YAMLError as e:
            raise PronoteConfigError(f"{self.filename} is not valid YAML: {e}") from e

        if not isinstance(raw, dict):
            raise PronoteConfigError(f"{self.filename} should contain a mapping, got {type(raw).__name__}")

        try:
            parsed = _ConfigFile(**raw)
        except ValidationError as e:
            raise PronoteConfigError(f"Invalid configuration in {self.filename}: {e}") from e

        object.__setattr__(self, "accounts", [AppAccount(a.username, a.password, a.url) for a in parsed.accounts])
        object.__setattr__(self, "refresh_every", parsed.refresh_every)
        object.__setattr__(self, "account_timeout", parsed.account_timeout)
        object.__setattr__(self, "task_list_id", parsed.task_list_id or None)

        google_credentials = Path(parsed.google_credentials)
        if not google_credentials.is_absolute():
            google_credentials = self.filename.parent / google_credentials
        object.__setattr__(self, "google_credentials", google_credentials)

    def _find_config_file(self) -> Path:
        """
        An explicitly given file has to exist. Without one, `config.yml` is looked up in the working directory and its
        parents, then in the home directory and `~/.config/pronote-bridge`.
        """
        if self.filename:
            explicit = Path(self.filename).expanduser().resolve()
            if not explicit.is_file():
                raise FileNotFoundError(f"Configuration file not found: {explicit}")
            return explicit

        cwd = Path.cwd()
        home = Path.home()
        for directory in [cwd, *cwd.parents, home, home / ".config/pronote-bridge"]:
            candidate = directory / self.CONFIG_FILENAME
            if candidate.is_file():
                return candidate.resolve()

        raise FileNotFoundError(f"No {self.CONFIG_FILENAME} found from {cwd} upwards, nor in {home}")
