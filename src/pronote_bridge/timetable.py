from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import TYPE_CHECKING

from ._fetcher import CachedListFetcher
from .common import current_monday
from .objects import Lesson
from .subjects import subject_name

if TYPE_CHECKING:
    import pronotepy
    from cachetools import TTLCache

__all__ = ["Timetable"]

# pronotepy turns both bounds into midnight of that day, so the week ends on sunday 00:00 to keep saturday lessons.
WEEK_LENGTH = timedelta(days=6)


@dataclass
class Timetable(CachedListFetcher[Lesson]):
    """
    The lessons of the current week, from monday 01:00 up to and including saturday.

    Example:
    -------
    >>> for lesson in Timetable(session):
    >>>     print(f"{lesson.start:%a %H:%M} {lesson.subject} ({lesson.room})")
    Mon 08:00 Mathématiques (B204)

    """

    today: date | None = None

    @property
    def _cache(self) -> TTLCache:
        return self.session.caches.timetable

    def _fetch(self, client: pronotepy.Client) -> list[pronotepy.Lesson]:
        monday = current_monday(self.today)
        return client.lessons(monday, (monday + WEEK_LENGTH).date())

    def _convert(self, raw: list[pronotepy.Lesson]) -> list[Lesson]:
        return [
            Lesson(
                start=lesson.start,
                end=lesson.end,
                subject=subject_name(lesson.subject.name if lesson.subject else None),
                teacher=lesson.teacher_name or "",
                room=lesson.classroom or "",
                absent=bool(lesson.canceled) or _teacher_absent(lesson.status),
                cancelled=bool(lesson.canceled),
            )
            for lesson in raw
        ]


def _teacher_absent(status: str | None) -> bool:
    return bool(status) and "absent" in status.lower()
