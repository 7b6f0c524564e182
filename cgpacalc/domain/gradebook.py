from __future__ import annotations

import logging
from typing import Any

from cgpacalc.domain.logic.gpa import calc_cgpa, calc_sgpa
from cgpacalc.domain.logic.grading import DEFAULT_GRADE_MAPPING, cgpa_emoji, coerce_number
from cgpacalc.domain.models.entities import Course, GradeMode, Semester

logger = logging.getLogger(__name__)

COURSE_FIELDS = ("name", "credits", "grade")


class GradeBookError(Exception):
    pass


class GradeBook:
    """
    Semesters of courses plus the grading mode and letter mapping for one session.

    SGPA and CGPA are computed on read, so they always reflect the latest
    edit, mode and mapping. Indices follow list positions and must be in range;
    negative indices are rejected rather than counted from the end.
    """

    def __init__(self, mode: GradeMode | str = GradeMode.NUMERICAL) -> None:
        self.semesters: list[Semester] = []
        self.mode = GradeMode(mode)
        self._mapping: dict[str, float] = dict(DEFAULT_GRADE_MAPPING)

    @property
    def mapping(self) -> dict[str, float]:
        return dict(self._mapping)

    def _blank_grade(self) -> float | str:
        return 0 if self.mode == GradeMode.NUMERICAL else ""

    def _semester(self, index: int) -> Semester:
        if not 0 <= index < len(self.semesters):
            raise IndexError(f"No semester at index {index}")
        return self.semesters[index]

    def _course(self, semester_index: int, course_index: int) -> Course:
        courses = self._semester(semester_index).courses
        if not 0 <= course_index < len(courses):
            raise IndexError(f"No course at index {course_index} in semester {semester_index}")
        return courses[course_index]

    def sgpa(self, semester_index: int, *, round_to: int | None = None) -> float:
        courses = self._semester(semester_index).courses
        return calc_sgpa(courses, self.mode, self._mapping, round_to=round_to)

    def cgpa(self, *, round_to: int | None = None) -> float:
        return calc_cgpa(
            (sem.courses for sem in self.semesters),
            self.mode,
            self._mapping,
            round_to=round_to,
        )

    def total_credits(self) -> float:
        return sum(coerce_number(c.credits) for sem in self.semesters for c in sem.courses)

    def emoji(self) -> str:
        return cgpa_emoji(self.cgpa())

    def add_semester(self) -> Semester:
        semester = Semester(courses=[Course("Course 1", 0, self._blank_grade())])
        self.semesters.append(semester)
        logger.debug("Added semester %d", len(self.semesters))
        return semester

    def remove_semester(self, semester_index: int) -> None:
        self._semester(semester_index)
        del self.semesters[semester_index]
        logger.debug("Removed semester at index %d", semester_index)

    def add_course(self, semester_index: int) -> Course:
        courses = self._semester(semester_index).courses
        course = Course(f"Course {len(courses) + 1}", 0, self._blank_grade())
        courses.append(course)
        logger.debug("Added %s to semester %d", course.name, semester_index)
        return course

    def remove_course(self, semester_index: int, course_index: int) -> None:
        self._course(semester_index, course_index)
        courses = self.semesters[semester_index].courses
        del courses[course_index]
        # remaining courses are renumbered, custom names included
        for position, course in enumerate(courses, start=1):
            course.name = f"Course {position}"
        logger.debug("Removed course %d from semester %d", course_index, semester_index)

    def edit_course(self, semester_index: int, course_index: int, field: str, value: Any) -> Course:
        if field not in COURSE_FIELDS:
            raise GradeBookError(f"Unknown course field: {field}")
        course = self._course(semester_index, course_index)
        if field == "name":
            course.name = str(value)
        elif field == "credits":
            course.credits = coerce_number(value)
        elif self.mode == GradeMode.NUMERICAL:
            course.grade = coerce_number(value)
        else:
            course.grade = "" if value is None else str(value)
        logger.debug("Set %s=%r on course %d of semester %d", field, value, course_index, semester_index)
        return course

    def set_mode(self, mode: GradeMode | str) -> None:
        # stored grades are kept as they are and reinterpreted under the new mode
        self.mode = GradeMode(mode)
        logger.debug("Grade mode set to %s", self.mode.value)

    def set_grade_mapping(self, letter: str, value: Any) -> None:
        if letter not in self._mapping:
            raise GradeBookError(f"Unsupported letter grade: {letter}")
        self._mapping[letter] = coerce_number(value)
        logger.debug("Grade %s now worth %s points", letter, self._mapping[letter])

    def reset_grade_mapping(self) -> None:
        self._mapping = dict(DEFAULT_GRADE_MAPPING)
