"""
AMRAP → estimated one-rep-max.

Three materially distinct formulas:

  Epley:   1RM ≈ w · (1 + r/30)
  Brzycki: 1RM ≈ w · 36 / (37 − r)      (more conservative at high reps)
  Mayhew:  1RM ≈ 100w / (52.2 + 41.9·e^(−0.055r))

Guardrails:
  r == 1          → the working weight itself
  r >= soft warn  → estimate flagged low-confidence
  r >  hard cap   → refused (e1rm 0), or computed at the cap when allowed

Estimates are rounded to the plate step so they line up with TM math.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .config import (
    BRZYCKI_MAX_REPS,
    E1RM_HARD_CAP_REPS,
    E1RM_ROUND_TO,
    E1RM_SOFT_WARN_REPS,
)
from .loads import round_to_nearest
from .models import Exercise, PerformanceRecord


class OneRepMaxFormula(str, Enum):
    EPLEY = "epley"
    BRZYCKI = "brzycki"
    MAYHEW = "mayhew"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[OneRepMaxFormula, str] = {
    OneRepMaxFormula.EPLEY: "Simple, widely used linear estimate (1 + reps/30).",
    OneRepMaxFormula.BRZYCKI: "More conservative at high reps (36 / (37 − reps)).",
    OneRepMaxFormula.MAYHEW: "Bench-tested sigmoid model; realistic at higher reps.",
}


class AmrapNote(str, Enum):
    """Quality flag attached to an estimate."""

    NONE = "none"
    LOW_CONFIDENCE = "low_confidence"
    CAPPED = "capped"
    INVALID_TOO_MANY_REPS = "invalid_too_many_reps"


@dataclass(frozen=True)
class AmrapEstimate:
    e1rm: float       # already rounded to the step; 0 when refused
    note: AmrapNote
    reps_used: int    # reps fed to the formula (the cap when capped, actual reps when refused)


def raw_estimate(weight: float, reps: int, formula: OneRepMaxFormula) -> float:
    """
    Unrounded 1RM estimate for a set.

    Args:
        weight: Load lifted
        reps: Reps completed
        formula: Estimation formula

    Returns:
        Estimated 1RM
    """
    if formula is OneRepMaxFormula.BRZYCKI:
        r = min(reps, BRZYCKI_MAX_REPS)
        return weight * (36.0 / (37.0 - r))
    if formula is OneRepMaxFormula.MAYHEW:
        return (100.0 * weight) / (52.2 + 41.9 * math.exp(-0.055 * reps))
    return weight * (1.0 + reps / 30.0)


def estimate_1rm(
    weight: float,
    reps: int,
    formula: OneRepMaxFormula = OneRepMaxFormula.EPLEY,
    soft_warn_at: int = E1RM_SOFT_WARN_REPS,
    hard_cap: int = E1RM_HARD_CAP_REPS,
    refuse_above_hard_cap: bool = True,
    round_to: float = E1RM_ROUND_TO,
) -> AmrapEstimate:
    """
    Estimate 1RM from an AMRAP set, with guardrails and a quality note.

    Args:
        weight: Load lifted
        reps: Reps completed
        formula: Estimation formula (default Epley)
        soft_warn_at: Reps at which the estimate becomes low-confidence
        hard_cap: Reps above which the estimate is refused or capped
        refuse_above_hard_cap: Refuse (True) or compute at the cap (False)
        round_to: Rounding step for the result

    Returns:
        AmrapEstimate
    """
    if weight <= 0 or reps <= 0:
        return AmrapEstimate(e1rm=0.0, note=AmrapNote.NONE, reps_used=0)

    if reps == 1:
        return AmrapEstimate(
            e1rm=float(round_to_nearest(weight, round_to)),
            note=AmrapNote.NONE,
            reps_used=1,
        )

    if reps > hard_cap:
        if refuse_above_hard_cap:
            return AmrapEstimate(
                e1rm=0.0,
                note=AmrapNote.INVALID_TOO_MANY_REPS,
                reps_used=reps,
            )
        raw = raw_estimate(weight, hard_cap, formula)
        return AmrapEstimate(
            e1rm=float(round_to_nearest(raw, round_to)),
            note=AmrapNote.CAPPED,
            reps_used=hard_cap,
        )

    raw = raw_estimate(weight, reps, formula)
    note = AmrapNote.LOW_CONFIDENCE if reps >= soft_warn_at else AmrapNote.NONE
    return AmrapEstimate(
        e1rm=float(round_to_nearest(raw, round_to)),
        note=note,
        reps_used=reps,
    )


def record_from_amrap(
    exercise: Exercise,
    weight: float,
    reps: int,
    date: str | None = None,
    formula: OneRepMaxFormula = OneRepMaxFormula.EPLEY,
    round_to: float = E1RM_ROUND_TO,
) -> PerformanceRecord:
    """
    Build a PerformanceRecord from a logged AMRAP set.

    A refused estimate yields a record with estimated_1rm 0, which the
    progression engine treats as absent data.
    """
    est = estimate_1rm(weight, reps, formula=formula, round_to=round_to)
    return PerformanceRecord(exercise=exercise, estimated_1rm=est.e1rm, date=date)
