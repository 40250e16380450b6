from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from logprise import logger

if TYPE_CHECKING:
    from .google_tasks import GoogleTasks
    from .objects import Homework, Task

__all__ = ["homework_notes", "sync_homeworks"]

MARKER: Final[str] = "pronote-bridge:"
_MARKER_RE = re.compile(rf"^{re.escape(MARKER)}([0-9a-f]+)\s*$", flags=re.MULTILINE)


def homework_notes(homework: Homework) -> str:
    lines = [homework.content]
    lines.extend(f"{f.name}: {f.url}" for f in homework.files)
    lines.append("")
    lines.append(MARKER + homework.hash)
    return "\n".join(lines)


def _known_hashes(tasks: list[Task]) -> set[str]:
    known = set()
    for task in tasks:
        known.update(_MARKER_RE.findall(task.notes or ""))
    return known


def sync_homeworks(homeworks: list[Homework], tasks: GoogleTasks, task_list_id: str) -> list[Task]:
    """
    Create a task for every homework that isn't in the list yet.

    Tasks are recognised by the homework hash stored in their notes, so finishing or renaming a task doesn't create it again.
    """
    known = _known_hashes(tasks.tasks(task_list_id))

    created = []
    for homework in homeworks:
        if homework.hash in known:
            continue

        title = f"{homework.subject}: {homework.content}" if homework.subject else homework.content
        created.append(tasks.insert_task(task_list_id, title[:100], homework_notes(homework), homework.due))
        known.add(homework.hash)

    logger.info(f"{len(created)} new homework(s) pushed to {task_list_id}")
    return created
