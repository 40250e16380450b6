# pylint: disable=invalid-name

from __future__ import annotations

from datetime import date, datetime

from pydantic import constr
from pydantic.dataclasses import Field, dataclass

from .hashing import hash_grade, hash_homework

String = constr(strip_whitespace=True)
Url = String

Date = date
DateTime = datetime


@dataclass
class Grade:
    subject: String
    date: Date
    value: float = 0
    scale: float = 20
    average: float = 0
    coefficient: float = 1
    best: float = 20
    worst: float = 0
    comment: String = ""

    hash: String = Field(default="", repr=False)

    def __post_init__(self):
        if not self.hash:
            self.hash = hash_grade(self)

    @property
    def on_20(self) -> float:
        if not self.scale:
            return 0
        return self.value / self.scale * 20


@dataclass
class Lesson:
    start: DateTime
    end: DateTime
    subject: String = ""
    teacher: String = ""
    room: String = ""
    absent: bool = False
    cancelled: bool = False


@dataclass
class HomeworkFile:
    name: String
    url: Url


@dataclass
class Homework:
    subject: String
    content: String
    due: DateTime
    given_at: DateTime
    files: list[HomeworkFile] = Field(default_factory=list)
    done: bool = False

    hash: String = Field(default="", repr=False)

    def __post_init__(self):
        if not self.hash:
            self.hash = hash_homework(self)


@dataclass
class Averages:
    value: float = 0
    everyone: float = 0


@dataclass
class StudentData:
    username: String
    grades: list[Grade]
    timetable: list[Lesson]
    homeworks: list[Homework]
    averages: Averages


@dataclass
class TaskList:
    id: String
    title: String


@dataclass
class Task:
    id: String
    title: String = ""
    notes: String = ""
    status: String = "needsAction"
    due: DateTime | None = None
