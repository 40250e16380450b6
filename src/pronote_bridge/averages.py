from __future__ import annotations

from typing import TYPE_CHECKING

from ._fetcher import CachedFetcher
from .common import as_float
from .objects import Averages as AveragesObject

if TYPE_CHECKING:
    import pronotepy
    from cachetools import TTLCache

__all__ = ["Averages"]


class Averages(CachedFetcher[AveragesObject]):
    """
    The overall average of the student, and the one of the whole class, for the current period.

    Example:
    -------
    >>> averages = Averages(session).get()
    >>> print(averages.value, averages.everyone)
    14.2 12.9

    """

    @property
    def _cache(self) -> TTLCache:
        return self.session.caches.averages

    def _fetch(self, client: pronotepy.Client) -> tuple[str | None, str | None]:
        period = client.current_period
        return period.overall_average, period.class_overall_average

    def _convert(self, raw: tuple[str | None, str | None]) -> AveragesObject:
        student, everyone = raw
        return AveragesObject(value=as_float(student, 0), everyone=as_float(everyone, 0))

    def _empty(self) -> AveragesObject:
        return AveragesObject()
