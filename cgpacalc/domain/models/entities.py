from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class GradeMode(str, Enum):
    NUMERICAL = "numerical"
    LETTER = "letter"


@dataclass
class Course:
    name: str
    credits: float = 0
    # float in numerical mode, letter key in letter mode
    grade: float | str = 0


@dataclass
class Semester:
    courses: list[Course] = field(default_factory=list)
