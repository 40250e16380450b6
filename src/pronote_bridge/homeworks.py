from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from ._fetcher import CachedListFetcher
from .objects import Homework, HomeworkFile
from .subjects import subject_name

if TYPE_CHECKING:
    import pronotepy
    from cachetools import TTLCache

__all__ = ["Homeworks"]

LOOK_AHEAD = timedelta(days=151)
# A homework is for the day before it's due at 11PM.
DUE_SHIFT = timedelta(hours=3)


@dataclass
class Homeworks(CachedListFetcher[Homework]):
    """
    The homework from yesterday onwards, about 5 months ahead.

    Example:
    -------
    >>> for homework in Homeworks(session):
    >>>     print(f"{homework.due:%Y-%m-%d} {homework.subject}: {homework.content}")
    2024-03-12 Français: Lire le chapitre 3

    """

    now: datetime | None = None

    @property
    def _cache(self) -> TTLCache:
        return self.session.caches.homeworks

    @property
    def _now(self) -> datetime:
        return self.now or datetime.now()

    def _fetch(self, client: pronotepy.Client) -> list[pronotepy.Homework]:
        yesterday = (self._now - timedelta(days=1)).date()
        return client.homework(yesterday, yesterday + LOOK_AHEAD)

    def _convert(self, raw: list[pronotepy.Homework]) -> list[Homework]:
        fetched_at = self._now

        return [
            Homework(
                subject=subject_name(hw.subject.name if hw.subject else None),
                content=hw.description or "",
                due=datetime.combine(hw.date, datetime.min.time()) + DUE_SHIFT,
                given_at=fetched_at,
                files=[HomeworkFile(name=f.name or "", url=f.url or "") for f in hw.files or []],
                done=bool(hw.done),
            )
            for hw in raw
        ]
