from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

from .averages import Averages
from .cache import TtlCaches
from .grades import Grades
from .homeworks import Homeworks
from .objects import StudentData
from .session import PronoteSession
from .timetable import Timetable

if TYPE_CHECKING:
    from .accounts import Account
    from .config import Config
    from .objects import Averages as AveragesObject
    from .objects import Grade, Homework, Lesson

__all__ = ["PronoteBridge"]


@dataclass
class PronoteBridge:
    """
    Entry point: one set of caches shared by every account of the configuration.

    Example:
    -------
    >>> bridge = PronoteBridge(PathConfig())
    >>> for account in bridge.config.accounts:
    >>>     print(bridge.averages(account))
    Averages(value=14.2, everyone=12.9)

    """

    config: Config
    timer: Callable[[], float] = field(default=time.monotonic, repr=False)
    caches: TtlCaches = field(init=False, repr=False)

    def __post_init__(self):
        self.config.validate()
        self.caches = TtlCaches.from_config(self.config, timer=self.timer)

    def session(self, account: Account) -> PronoteSession:
        return PronoteSession(account, self.caches)

    def grades(self, account: Account) -> list[Grade]:
        return Grades(self.session(account)).get()

    def timetable(self, account: Account) -> list[Lesson]:
        return Timetable(self.session(account)).get()

    def homeworks(self, account: Account) -> list[Homework]:
        return Homeworks(self.session(account)).get()

    def averages(self, account: Account) -> AveragesObject:
        return Averages(self.session(account)).get()

    def student_data(self, account: Account) -> StudentData:
        session = self.session(account)
        return StudentData(
            username=account.username,
            grades=Grades(session).get(),
            timetable=Timetable(session).get(),
            homeworks=Homeworks(session).get(),
            averages=Averages(session).get(),
        )
