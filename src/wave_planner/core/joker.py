"""
Joker sets: optional heavier work after the AMRAP set.

  5s week: none
  3s week: triples from 95% TM, stepping by triple_step
  1s week: singles from 100% TM, stepping by single_step

The ceiling is 1 + max_over_tm, never above 120% TM.
"""

from dataclasses import dataclass

from .config import (
    DEFAULT_ROUND_TO,
    JOKER_HARD_CEILING,
    JOKER_MAX_OVER_TM,
    JOKER_SINGLE_START,
    JOKER_SINGLE_STEP,
    JOKER_TRIPLE_START,
    JOKER_TRIPLE_STEP,
    PLATE_EPSILON,
)
from .loads import round_load
from .models import JokerSet, WeekKind


@dataclass(frozen=True)
class JokerParams:
    triple_step: float = JOKER_TRIPLE_STEP
    single_step: float = JOKER_SINGLE_STEP
    max_over_tm: float = JOKER_MAX_OVER_TM
    round_to: float = DEFAULT_ROUND_TO


def _percentages(start: float, step: float, ceiling: float) -> list[float]:
    pcts: list[float] = []
    if step <= 0:
        return [start] if start <= ceiling + PLATE_EPSILON else []
    p = start
    while p <= ceiling + PLATE_EPSILON:
        pcts.append(round(p, 4))
        p += step
    return pcts


def generate_jokers(
    training_max: float,
    kind: WeekKind,
    params: JokerParams = JokerParams(),
) -> list[JokerSet]:
    """
    Full candidate joker sequence for a week.

    Args:
        training_max: TM for the exercise
        kind: Rep family of the week
        params: Step sizes, ceiling and rounding

    Returns:
        Joker sets in increasing weight; empty on 5s weeks
    """
    if kind is WeekKind.FIVE:
        return []

    round_to = params.round_to if params.round_to > 0 else DEFAULT_ROUND_TO
    ceiling = min(1.0 + params.max_over_tm, JOKER_HARD_CEILING)

    if kind is WeekKind.THREE:
        start, step, reps = JOKER_TRIPLE_START, params.triple_step, 3
    else:
        start, step, reps = JOKER_SINGLE_START, params.single_step, 1

    return [
        JokerSet(percentage=pct, reps=reps, weight=round_load(training_max * pct, round_to))
        for pct in _percentages(start, step, ceiling)
    ]


def next_joker(
    training_max: float,
    kind: WeekKind,
    params: JokerParams = JokerParams(),
    after: list[JokerSet] | None = None,
) -> JokerSet | None:
    """
    The next joker set after those already performed.

    Returns None when the ceiling is reached or when the last performed set
    is not part of the generated sequence.
    """
    sequence = generate_jokers(training_max, kind, params)
    if not after:
        return sequence[0] if sequence else None

    last = after[-1]
    for i, candidate in enumerate(sequence):
        if candidate.percentage == last.percentage and candidate.reps == last.reps:
            return sequence[i + 1] if i + 1 < len(sequence) else None
    return None
