from datetime import datetime

import pytest

from pronote_bridge import sync_homeworks
from pronote_bridge.objects import Homework, HomeworkFile, Task
from pronote_bridge.sync import MARKER, homework_notes


def _homework(content: str, subject: str = "Français") -> Homework:
    return Homework(
        subject=subject,
        content=content,
        due=datetime(2024, 3, 12, 3, 0),
        given_at=datetime(2024, 3, 6, 17, 30),
        files=[HomeworkFile(name="chapitre3.pdf", url="https://example.com/chapitre3.pdf")],
    )


@pytest.fixture
def google_tasks(mocker):
    tasks = mocker.MagicMock(name="GoogleTasks")
    tasks.tasks.return_value = []
    tasks.insert_task.side_effect = lambda list_id, title, notes, due: Task(id=f"id-{title}", title=title, notes=notes)
    return tasks


def test_homework_notes():
    homework = _homework("Lire le chapitre 3")

    assert homework_notes(homework) == f"Lire le chapitre 3\nchapitre3.pdf: https://example.com/chapitre3.pdf\n\n{MARKER}{homework.hash}"


def test_sync_creates_new_homeworks(google_tasks):
    homeworks = [_homework("Lire le chapitre 3"), _homework("Exercice 4 p. 52", subject="")]

    sut = sync_homeworks(homeworks, google_tasks, "AAA")

    assert [t.title for t in sut] == ["Français: Lire le chapitre 3", "Exercice 4 p. 52"]
    google_tasks.tasks.assert_called_once_with("AAA")
    first_call = google_tasks.insert_task.call_args_list[0]
    assert first_call.args[0] == "AAA"
    assert first_call.args[3] == datetime(2024, 3, 12, 3, 0)


def test_sync_skips_known_homeworks(google_tasks):
    known = _homework("Lire le chapitre 3")
    google_tasks.tasks.return_value = [Task(id="t1", title="renamed by the student", notes=homework_notes(known), status="completed")]

    sut = sync_homeworks([known, _homework("Exercice 4 p. 52")], google_tasks, "AAA")

    assert [t.title for t in sut] == ["Français: Exercice 4 p. 52"]


def test_sync_skips_duplicates_within_one_run(google_tasks):
    sut = sync_homeworks([_homework("Lire le chapitre 3"), _homework("Lire le chapitre 3")], google_tasks, "AAA")

    assert len(sut) == 1


def test_sync_long_titles_are_cut(google_tasks):
    sut = sync_homeworks([_homework("x" * 300)], google_tasks, "AAA")

    assert len(sut[0].title) == 100
