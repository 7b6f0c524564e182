from __future__ import annotations

from typing import Iterable, Mapping

from cgpacalc.domain.logic.grading import coerce_number
from cgpacalc.domain.models.entities import Course, GradeMode


def grade_points(course: Course, mode: GradeMode, mapping: Mapping[str, float]) -> float:
    if mode == GradeMode.NUMERICAL:
        return coerce_number(course.grade)
    # unmapped letters (including "" for unset) contribute nothing
    if not isinstance(course.grade, str):
        return 0.0
    return coerce_number(mapping.get(course.grade))


def _weighted_average(
    courses: Iterable[Course],
    mode: GradeMode,
    mapping: Mapping[str, float],
    round_to: int | None,
) -> float:
    weighted = 0.0
    total_credits = 0.0
    for c in courses:
        credits = coerce_number(c.credits)
        weighted += credits * grade_points(c, mode, mapping)
        total_credits += credits
    if total_credits <= 0:
        return 0.0
    average = weighted / total_credits
    return round(average, round_to) if round_to is not None else average


def calc_sgpa(
    courses: Iterable[Course],
    mode: GradeMode,
    mapping: Mapping[str, float],
    *,
    round_to: int | None = None,
) -> float:
    """
    SGPA = Σ(credits * grade_point) / Σ(credits), 0 when the credit total is zero or negative.
    """
    return _weighted_average(courses, mode, mapping, round_to)


def calc_cgpa(
    semester_courses: Iterable[Iterable[Course]],
    mode: GradeMode,
    mapping: Mapping[str, float],
    *,
    round_to: int | None = None,
) -> float:
    """
    Weighted over every course of every semester, not the mean of the SGPAs.
    """
    flattened = (c for sem in semester_courses for c in sem)
    return _weighted_average(flattened, mode, mapping, round_to)
