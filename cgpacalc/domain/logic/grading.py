from __future__ import annotations

import math
from typing import Any

DEFAULT_GRADE_MAPPING: dict[str, float] = {
    "O": 10,
    "A+": 9,
    "A": 8,
    "B+": 7,
    "B": 6,
    "C": 5,
}

GRADE_LETTERS: tuple[str, ...] = tuple(DEFAULT_GRADE_MAPPING)

ROCKET = "🚀"
CONFUSED = "⁉️"

EMOJI_BANDS: list[tuple[float, str]] = [
    (9, "🏆"),
    (8, "😎"),
    (7, "😊"),
    (6, "🙂"),
    (5, "😐"),
]
BELOW_BANDS = "😟"


def coerce_number(value: Any) -> float:
    """Read user input as a number, treating anything unusable as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def cgpa_emoji(cgpa: float) -> str:
    if cgpa == 0:
        return ROCKET
    if cgpa > 10 or cgpa < 0:
        return CONFUSED
    for low, symbol in EMOJI_BANDS:
        if cgpa >= low:
            return symbol
    return BELOW_BANDS
