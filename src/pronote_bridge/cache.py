from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Final

from cachetools import TTLCache

if TYPE_CHECKING:
    from .config import Config

__all__ = ["TtlCaches"]

# One entry per account, this only guards against unbounded growth.
MAX_ENTRIES: Final[int] = 1_024


def _ttl_cache(ttl: float, timer: Callable[[], float]) -> TTLCache:
    return TTLCache(maxsize=MAX_ENTRIES, ttl=ttl, timer=timer)


@dataclass
class TtlCaches:
    """
    The in-memory caches, all keyed by username.

    An entry is deleted a fixed delay after it was stored, reading it doesn't extend its life.
    Sessions live for `session_ttl` seconds, the fetched data for `data_ttl` seconds.
    """

    session_ttl: float
    data_ttl: float
    timer: Callable[[], float] = field(default=time.monotonic, repr=False)

    sessions: TTLCache = field(init=False, repr=False)
    grades: TTLCache = field(init=False, repr=False)
    timetable: TTLCache = field(init=False, repr=False)
    homeworks: TTLCache = field(init=False, repr=False)
    averages: TTLCache = field(init=False, repr=False)

    def __post_init__(self):
        if self.session_ttl <= 0 or self.data_ttl <= 0:
            raise ValueError(f"Time-to-live must be positive, got sessions={self.session_ttl}, data={self.data_ttl}")

        self.sessions = _ttl_cache(self.session_ttl, self.timer)
        for name in self._data_caches():
            setattr(self, name, _ttl_cache(self.data_ttl, self.timer))

    @classmethod
    def from_config(cls, config: Config, timer: Callable[[], float] = time.monotonic) -> TtlCaches:
        return cls(session_ttl=config.session_ttl, data_ttl=config.cache_ttl, timer=timer)

    @staticmethod
    def _data_caches() -> list[str]:
        return ["grades", "timetable", "homeworks", "averages"]

