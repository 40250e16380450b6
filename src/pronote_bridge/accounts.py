from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

required_fields: Final[list[str]] = ["username", "password", "url"]

__all__ = ["Account", "AppAccount", "EnvAccount"]


class Account:
    username: str = ""
    password: str = ""
    url: str = ""

    def validate(self) -> None:
        """Strips every field, and complains about all the ones left empty at once."""
        cleaned = {name: (getattr(self, name) or "").strip() for name in required_fields}
        for name, value in cleaned.items():
            object.__setattr__(self, name, value)

        missing = [name for name, value in cleaned.items() if not value]
        if missing:
            raise RuntimeError(f"Please verify and correct these attributes: {missing}")

    def as_dict(self) -> dict[str, str]:
        return {field: getattr(self, field) for field in required_fields}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(username={self.username!r}, url={self.url!r})"


@dataclass(frozen=True, repr=False)
class EnvAccount(Account):
    def __post_init__(self):
        for field in required_fields:
            object.__setattr__(self, field, os.getenv(f"PRONOTE_{field.upper()}", ""))


@dataclass(frozen=True, repr=False)
class AppAccount(Account):
    username: str
    password: str
    url: str
