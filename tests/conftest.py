import os
from collections.abc import Generator
from datetime import date, datetime
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest

from pronote_bridge import AppAccount, AppConfig, PronoteSession, TtlCaches


class FakeClock:
    """A timer for the TTL caches that only moves when told to."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def subject(name: str | None) -> SimpleNamespace | None:
    return SimpleNamespace(name=name) if name is not None else None


def make_grade(id_: str = "g1", **kwargs) -> SimpleNamespace:
    values = {
        "id": id_,
        "grade": "15,5",
        "out_of": "20",
        "average": "12,25",
        "max": "18",
        "min": "4",
        "coefficient": "2",
        "comment": "Contrôle chapitre 2",
        "date": date(2024, 3, 4),
        "subject": subject("MATHEMATIQUES"),
    }
    values.update(kwargs)
    return SimpleNamespace(**values)


def make_period(start: datetime, end: datetime, grades: list, **kwargs) -> SimpleNamespace:
    values = {"start": start, "end": end, "grades": grades, "overall_average": "14,2", "class_overall_average": "12,9"}
    values.update(kwargs)
    return SimpleNamespace(**values)


def make_lesson(**kwargs) -> SimpleNamespace:
    values = {
        "start": datetime(2024, 3, 4, 8, 0),
        "end": datetime(2024, 3, 4, 9, 0),
        "classroom": "B204",
        "subject": subject("FRANCAIS"),
        "teacher_name": "M. DURAND",
        "canceled": False,
        "status": None,
    }
    values.update(kwargs)
    return SimpleNamespace(**values)


def make_homework(**kwargs) -> SimpleNamespace:
    values = {
        "description": "Lire le chapitre 3",
        "date": date(2024, 3, 12),
        "subject": subject("FRANCAIS"),
        "done": False,
        "files": [SimpleNamespace(name="chapitre3.pdf", url="https://example.com/chapitre3.pdf")],
    }
    values.update(kwargs)
    return SimpleNamespace(**values)


@pytest.fixture
def tmp_path(tmp_path) -> Generator[Any, Any, None]:
    """Enhanced tmp_path fixture that changes working directory."""
    original_dir = Path.cwd()
    try:
        os.chdir(tmp_path)
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def account() -> AppAccount:
    return AppAccount(username="marie.dupont", password="secret", url="https://0000000a.index-education.net/pronote/eleve.html")


@pytest.fixture
def config(account) -> AppConfig:
    return AppConfig(accounts=[account], refresh_every=300, account_timeout=600)


@pytest.fixture
def caches(config, clock) -> TtlCaches:
    return TtlCaches.from_config(config, timer=clock)


@pytest.fixture
def client(mocker):
    """What `pronotepy.Client` returns: a logged in client without any data."""
    client = mocker.MagicMock(name="pronotepy.Client()")
    client.logged_in = True
    client.periods = []
    client.lessons.return_value = []
    client.homework.return_value = []
    client.current_period = make_period(datetime(2023, 9, 1), datetime(2023, 12, 1), [])
    return client


@pytest.fixture(autouse=True)
def client_class(mocker, client):
    """No test ever reaches a real Pronote server."""
    return mocker.patch("pronote_bridge.session.pronotepy.Client", return_value=client)


@pytest.fixture
def session(account, caches) -> PronoteSession:
    return PronoteSession(account, caches)
