"""
Training max progression between cycles.

Two policies:

  Classic: fixed bump per cycle: +5 upper body, +10 lower body.

  Auto: move the TM toward 90% of the best AMRAP estimated 1RM:
    target = round(best_e1rm) × 0.90
    delta  = clip(max(target − TM, 0), 0.5 × classic, 2.0 × classic)
    With no usable AMRAP data the TM still moves by 0.5 × classic.

All functions are pure. advance() returns a new TrainingMaxSet; the
caller's set is never modified.
"""

from typing import Iterable, Sequence

from .config import (
    AUTO_MAX_DELTA_FACTOR,
    AUTO_MIN_DELTA_FACTOR,
    AUTO_NO_DATA_BUMP_FACTOR,
    AUTO_TM_FACTOR,
    LOWER_BODY_INCREMENT,
    UPPER_BODY_INCREMENT,
)
from .loads import round_half_up
from .models import (
    BodyRegion,
    Exercise,
    PerformanceRecord,
    ProgressionPolicy,
    TrainingMaxSet,
    body_region,
)

_CLASSIC_INCREMENTS: dict[BodyRegion, float] = {
    BodyRegion.UPPER: UPPER_BODY_INCREMENT,
    BodyRegion.LOWER: LOWER_BODY_INCREMENT,
}


def classic_increment(exercise: Exercise) -> float:
    """
    Per-cycle classic bump for an exercise.

    Args:
        exercise: Exercise to look up

    Returns:
        5.0 for upper body, 10.0 for lower body
    """
    return _CLASSIC_INCREMENTS[body_region(exercise)]


def best_estimated_1rms(history: Iterable[PerformanceRecord]) -> dict[Exercise, int]:
    """
    Best rounded estimated 1RM per exercise.

    Records with a non-positive estimate are skipped. Each estimate is
    rounded to the nearest integer before comparison.

    Args:
        history: Performance records (the caller picks the window)

    Returns:
        {exercise: best rounded e1RM}; exercises without data are absent
    """
    best: dict[Exercise, int] = {}
    for record in history:
        if record.estimated_1rm <= 0:
            continue
        est = int(round_half_up(record.estimated_1rm))
        if est > best.get(record.exercise, 0):
            best[record.exercise] = est
    return best


def auto_delta(current: float, exercise: Exercise, best_estimate: float | None) -> float:
    """
    Auto-policy increment for one exercise.

    Args:
        current: Current training max
        exercise: Exercise being progressed
        best_estimate: Best estimated 1RM for the window, or None

    Returns:
        Increment to add to the current TM (never negative)
    """
    bump = classic_increment(exercise)

    if best_estimate is None or best_estimate <= 0:
        return bump * AUTO_NO_DATA_BUMP_FACTOR

    target_tm = round_half_up(best_estimate) * AUTO_TM_FACTOR
    raw_delta = max(target_tm - current, 0.0)
    min_delta = bump * AUTO_MIN_DELTA_FACTOR
    max_delta = bump * AUTO_MAX_DELTA_FACTOR
    return max(min_delta, min(raw_delta, max_delta))


def next_training_max(
    current: float,
    exercise: Exercise,
    policy: ProgressionPolicy,
    best_estimate: float | None = None,
) -> float:
    """
    Next cycle's training max for a single exercise.

    Args:
        current: Current training max
        exercise: Exercise being progressed
        policy: Classic or Auto
        best_estimate: Best estimated 1RM (ignored by Classic)

    Returns:
        Updated training max, never below current
    """
    if policy is ProgressionPolicy.CLASSIC:
        return current + classic_increment(exercise)
    return current + auto_delta(current, exercise, best_estimate)


def advance(
    current: TrainingMaxSet,
    active_exercises: Iterable[Exercise],
    policy: ProgressionPolicy,
    history: Sequence[PerformanceRecord] = (),
) -> TrainingMaxSet:
    """
    Compute next cycle's training maxes.

    Only exercises in active_exercises change; every other entry is copied
    through. History is not filtered by date.

    Args:
        current: Current training maxes (not modified)
        active_exercises: Exercises to progress
        policy: Classic or Auto
        history: AMRAP performance records for the relevant window

    Returns:
        New TrainingMaxSet
    """
    updated = current.copy()
    best = best_estimated_1rms(history) if policy is ProgressionPolicy.AUTO else {}

    for exercise in set(active_exercises):
        updated[exercise] = next_training_max(
            current[exercise],
            exercise,
            policy,
            best.get(exercise),
        )

    return updated


def training_max_deltas(before: TrainingMaxSet, after: TrainingMaxSet) -> dict[Exercise, float]:
    """Per-exercise change between two sets, for display."""
    return {ex: after[ex] - before[ex] for ex in Exercise}
