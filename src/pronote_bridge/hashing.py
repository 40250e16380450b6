from __future__ import annotations

import hashlib
import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .objects import Grade, Homework

__all__ = ["hash_grade", "hash_homework"]


def _digest(data: dict) -> str:
    as_json = json.dumps(data, sort_keys=True, default=str, ensure_ascii=False)
    return hashlib.sha256(as_json.encode("utf8")).hexdigest()


def hash_grade(grade: Grade) -> str:
    return _digest(
        {
            "subject": grade.subject,
            "date": grade.date.isoformat(),
            "value": grade.value,
            "scale": grade.scale,
            "coefficient": grade.coefficient,
            "comment": grade.comment,
        }
    )


def hash_homework(homework: Homework) -> str:
    """`done` and `given_at` are left out: checking off a homework doesn't make it a new one."""
    return _digest(
        {
            "subject": homework.subject,
            "due": homework.due.isoformat(),
            "content": homework.content,
            "files": sorted(f.url for f in homework.files),
        }
    )
