"""
Warm-up ramp from the empty bar to the first working set.

The bar for 10, then one to three ramp sets depending on how far the
first work set is from the bar. Never more than four sets in total.
"""

import math

from .config import (
    DEFAULT_BAR_WEIGHT,
    DEFAULT_ROUND_TO,
    WARMUP_BAR_REPS,
    WARMUP_MAX_STEPS,
    WARMUP_REP_BANDS,
    WARMUP_SPAN_ONE_STEP,
    WARMUP_SPAN_TWO_STEPS,
    WARMUP_TEMPLATES,
    WARMUP_TOP_REPS,
)
from .loads import round_load
from .models import Exercise, WarmupStep

_MOVEMENTS: dict[Exercise, str] = {
    Exercise.SQUAT: "5 min easy bodyweight squats / hip hinges",
    Exercise.DEADLIFT: "5 min kettlebell swings / RDL pattern",
    Exercise.BENCH: "5 min pushups / banded push-aparts",
    Exercise.ROW: "5 min band rows / scap retractions",
    Exercise.PRESS: "5 min band shoulder series / light DB press",
}


def suggested_movement(exercise: Exercise) -> str:
    """General warm-up drill to do before touching the bar."""
    return _MOVEMENTS[exercise]


def _ramp_step_count(span: float) -> int:
    if span < WARMUP_SPAN_ONE_STEP:
        return 1
    if span < WARMUP_SPAN_TWO_STEPS:
        return 2
    return 3


def _suggested_reps(weight: float, target: float) -> int:
    pct = weight / target
    for upper, reps in WARMUP_REP_BANDS:
        if pct < upper:
            return reps
    return WARMUP_TOP_REPS


def build_warmup_plan(
    target: float,
    bar: float = DEFAULT_BAR_WEIGHT,
    round_to: float = DEFAULT_ROUND_TO,
) -> list[WarmupStep]:
    """
    Build the warm-up ramp for a first working set.

    Ramp weights come from a percentage template picked by the bar-to-target
    span, rounded to the plate increment, and kept strictly between the bar
    and the target.

    Args:
        target: First working-set weight
        bar: Bar weight
        round_to: Plate increment

    Returns:
        Warm-up steps, starting with the bar; at most four
    """
    if not (math.isfinite(target) and math.isfinite(bar)) or target <= bar:
        return [WarmupStep(weight=bar, reps=WARMUP_BAR_REPS)]

    steps = [WarmupStep(weight=round_load(bar, round_to), reps=WARMUP_BAR_REPS)]
    span = target - bar
    step_count = _ramp_step_count(span)

    candidates = sorted({
        w for w in (round_load(target * pct, round_to) for pct in WARMUP_TEMPLATES[step_count])
        if bar < w < target
    })

    # Rounding can collapse every template weight; fall back to the midpoint.
    if not candidates:
        mid = round_load((bar + target) / 2.0, round_to)
        if bar < mid < target:
            candidates = [mid]

    for w in candidates[: WARMUP_MAX_STEPS - 1]:
        if steps[-1].weight != w:
            steps.append(WarmupStep(weight=w, reps=_suggested_reps(w, target)))

    steps = [s for s in steps if s.weight < target][:WARMUP_MAX_STEPS]

    if len(steps) == 1 and span >= WARMUP_SPAN_ONE_STEP:
        mid = round_load((bar + target) * 0.7, round_to)
        if bar < mid < target:
            steps.append(WarmupStep(weight=mid, reps=_suggested_reps(mid, target)))

    return steps
