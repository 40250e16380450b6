from __future__ import annotations

import contextlib
from datetime import date, datetime, timedelta
from typing import Any

__all__ = [
    "as_float",
    "current_monday",
    "school_year",
]

SCHOOL_YEAR_START = (9, 1)  # 1 September
SCHOOL_YEAR_END = (6, 30)  # 30 June


def as_float(value: Any, default: float) -> float:
    """
    Convert a Pronote number (a string like "12,5") to a float.

    Pronote puts labels like "Abs" or "Disp" where a grade is expected, those become `default`.
    """
    if value is None:
        return default

    if isinstance(value, (int, float)):
        return float(value)

    with contextlib.suppress(ValueError, AttributeError):
        return float(value.strip().replace(",", "."))

    return default


def current_monday(today: date | None = None) -> datetime:
    """Monday of the current week, at 01:00."""
    today = today or date.today()
    monday = today - timedelta(days=today.weekday())
    return datetime.combine(monday, datetime.min.time()).replace(hour=1)


def school_year(today: date | None = None) -> tuple[date, date]:
    """The running school year: from the most recent 1 September until 30 June after it."""
    today = today or date.today()

    start_year = today.year if (today.month, today.day) >= SCHOOL_YEAR_START else today.year - 1

    return date(start_year, *SCHOOL_YEAR_START), date(start_year + 1, *SCHOOL_YEAR_END)
