"""Score normalization for 1-5 Likert answers.
"""
# app/services/scoring.py
import math
from typing import Any, Iterable, Mapping

LIKERT_MIN = 1
LIKERT_MAX = 5
SCALE_FACTOR = 20


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def is_likert(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return LIKERT_MIN <= value <= LIKERT_MAX


def mean_score(values: Iterable[float]) -> int:
    """Integer mean of already normalized scores; an empty group is 0."""
    values = list(values)
    if not values:
        return 0
    return round_half_up(sum(values) / len(values))


def compute_score(answers: Mapping[str, Any]) -> int:
    """Normalize a submission to 0-100: round(mean(likert answers) * 20).

    Non-numeric answers (text, choices, booleans) and numbers outside 1-5 are
    ignored. Without any Likert answer the score is 0.
    """
    likert = [value for value in answers.values() if is_likert(value)]
    if not likert:
        return 0
    score = round_half_up(sum(likert) / len(likert) * SCALE_FACTOR)
    return max(0, min(100, score))
