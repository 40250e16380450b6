from datetime import datetime

import pytest
from conftest import make_grade, make_homework, make_lesson, make_period

from pronote_bridge import AppAccount, AppConfig, PronoteBridge, PronoteConfigError


@pytest.fixture
def bridge(config: AppConfig, clock) -> PronoteBridge:
    return PronoteBridge(config, timer=clock)


@pytest.fixture
def filled_client(client):
    client.periods = [make_period(datetime(2000, 9, 1), datetime(2100, 6, 30), [make_grade()])]
    client.lessons.return_value = [make_lesson()]
    client.homework.return_value = [make_homework()]
    return client


def test_bridge_caches_follow_config(bridge: PronoteBridge):
    assert bridge.caches.session_ttl == 480
    assert bridge.caches.data_ttl == 270


def test_bridge_validates_config():
    with pytest.raises(PronoteConfigError):
        PronoteBridge(AppConfig(refresh_every=10))


def test_student_data(bridge: PronoteBridge, account, filled_client, client_class):
    sut = bridge.student_data(account)

    assert sut.username == "marie.dupont"
    assert len(sut.grades) == 1
    assert len(sut.timetable) == 1
    assert len(sut.homeworks) == 1
    assert sut.averages.value == 14.2

    assert client_class.call_count == 1


def test_accessors_share_the_caches(bridge: PronoteBridge, account, filled_client):
    assert bridge.grades(account) is bridge.grades(account)
    assert bridge.timetable(account) is bridge.timetable(account)
    assert bridge.homeworks(account) is bridge.homeworks(account)
    assert bridge.averages(account) is bridge.averages(account)

    assert filled_client.lessons.call_count == 1
    assert filled_client.homework.call_count == 1


def test_accounts_are_cached_separately(bridge: PronoteBridge, account, filled_client, client_class):
    other = AppAccount("paul.dupont", "other", account.url)

    bridge.grades(account)
    bridge.grades(other)

    assert client_class.call_count == 2
    assert set(bridge.caches.grades) == {"marie.dupont", "paul.dupont"}
