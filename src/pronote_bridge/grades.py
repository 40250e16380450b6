from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from ._fetcher import CachedListFetcher
from .common import as_float, school_year
from .objects import Grade
from .subjects import subject_name

if TYPE_CHECKING:
    import pronotepy
    from cachetools import TTLCache

__all__ = ["Grades"]


@dataclass
class Grades(CachedListFetcher[Grade]):
    """
    The gradebook of the running school year (1 September until 30 June).

    Every period of the year is walked through, grades shared between overlapping periods (trimester vs year) are kept once.

    Example:
    -------
    >>> for grade in Grades(session):
    >>>     print(grade.subject, grade.value, "/", grade.scale)
    Mathématiques 15.5 / 20.0

    """

    today: date | None = None

    @property
    def _cache(self) -> TTLCache:
        return self.session.caches.grades

    def _fetch(self, client: pronotepy.Client) -> list[pronotepy.Grade]:
        start, end = school_year(self.today)

        raw = []
        seen = set()
        for period in client.periods:
            if period.end.date() < start or period.start.date() > end:
                continue

            for grade in period.grades:
                if grade.id in seen:
                    continue
                seen.add(grade.id)
                raw.append(grade)

        return raw

    def _convert(self, raw: list[pronotepy.Grade]) -> list[Grade]:
        return [self._to_grade(mark) for mark in raw]

    def _to_grade(self, mark: pronotepy.Grade) -> Grade:
        return Grade(
            subject=subject_name(mark.subject.name if mark.subject else None),
            date=mark.date or self.today or date.today(),
            value=as_float(mark.grade, 0),
            scale=as_float(mark.out_of, 20) or 20,
            average=as_float(mark.average, 0),
            coefficient=as_float(mark.coefficient, 1) or 1,
            best=as_float(mark.max, 20),
            worst=as_float(mark.min, 0),
            comment=mark.comment or "",
        )
