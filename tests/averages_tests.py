from datetime import datetime

from conftest import make_period
from pronotepy.exceptions import PronoteAPIError

from pronote_bridge import Averages, PronoteSession
from pronote_bridge.objects import Averages as AveragesObject


def test_averages_normal_flow(session: PronoteSession):
    sut = Averages(session).get()

    assert sut.value == 14.2
    assert sut.everyone == 12.9


def test_averages_missing(session: PronoteSession, client):
    client.current_period = make_period(datetime(2023, 9, 1), datetime(2023, 12, 1), [], overall_average=None, class_overall_average="NonNote")

    assert Averages(session).get() == AveragesObject(value=0, everyone=0)


def test_averages_failure(session: PronoteSession, client, mocker):
    type(client).current_period = mocker.PropertyMock(side_effect=PronoteAPIError("boom"))

    assert Averages(session).get() == AveragesObject(value=0, everyone=0)
    assert "marie.dupont" not in session.caches.averages


def test_averages_are_cached(session: PronoteSession, client, clock):
    first = Averages(session).get()
    client.current_period = make_period(datetime(2023, 9, 1), datetime(2023, 12, 1), [], overall_average="10")

    assert Averages(session).get() is first

    clock.advance(270)
    assert Averages(session).get().value == 10
