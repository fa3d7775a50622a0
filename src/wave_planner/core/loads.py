"""
Load rounding, plate math and working weights.

Rounding is half away from zero throughout (227.5 → 230 on a 5 step),
matching how lifters round on the platform rather than Python's
round-half-even.
"""

import math
from typing import Sequence

from .config import (
    DEFAULT_BAR_WEIGHT,
    DEFAULT_PLATE_INVENTORY,
    DEFAULT_ROUND_TO,
    FALLBACK_ROUND_TO,
    MAX_PLATES_PER_DENOMINATION,
    PLATE_EPSILON,
)
from .models import WeekScheme, WorkingSet


def round_half_up(x: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def round_load(x: float, increment: float) -> float:
    """
    Round a load to the nearest increment.

    An increment that is not finite or not positive falls back to 0.5.

    Args:
        x: Load to round
        increment: Plate increment (e.g. 5.0, 2.5)

    Returns:
        Rounded load
    """
    inc = increment if (math.isfinite(increment) and increment > 0) else FALLBACK_ROUND_TO
    return round_half_up(x / inc) * inc


def round_to_nearest(value: float, step: float = DEFAULT_ROUND_TO) -> int:
    """Round to the nearest step and truncate to int (e.g. 5 lb). Bad steps fall back to 0.5."""
    return int(round_load(value, step))


class PlateCalculator:
    """
    Per-side plate breakdown for a target barbell weight.

    Plates are taken greedily from the heaviest denomination down. Results
    are memoized per (target, bar) on the instance.
    """

    def __init__(
        self,
        bar_weight: float = DEFAULT_BAR_WEIGHT,
        round_to: float = DEFAULT_ROUND_TO,
        inventory: Sequence[float] = DEFAULT_PLATE_INVENTORY,
    ) -> None:
        self.bar_weight = bar_weight
        self.round_to = round_to
        self.inventory = sorted(
            (p for p in inventory if math.isfinite(p) and p > 0),
            reverse=True,
        )
        self._cache: dict[tuple[float, float], list[float]] = {}

    def round(self, x: float) -> float:
        """Round a load to this calculator's increment."""
        return round_load(x, self.round_to)

    def plates(self, target: float, bar_weight: float | None = None) -> list[float]:
        """
        Plates per side for a total target weight (bar + plates).

        Args:
            target: Total weight on the bar
            bar_weight: Override for the bar weight (e.g. SSB, trap bar)

        Returns:
            Per-side plate list, heaviest first; empty if nothing loads
        """
        bar = self.bar_weight if bar_weight is None else bar_weight
        key = (target, bar)
        if key in self._cache:
            return list(self._cache[key])

        if not (math.isfinite(target) and math.isfinite(bar)) or bar <= 0 or target < bar:
            return []

        remaining = (target - bar) / 2.0
        out: list[float] = []
        for plate in self.inventory:
            count = 0
            while remaining + PLATE_EPSILON >= plate and count < MAX_PLATES_PER_DENOMINATION:
                out.append(plate)
                remaining -= plate
                count += 1

        self._cache[key] = out
        return list(out)


def format_load(x: float) -> str:
    """215 → "215", 215.5 → "215.5"."""
    if round_half_up(x) == x:
        return f"{x:.0f}"
    return f"{x:.1f}"


def format_plate_list(plates: Sequence[float]) -> str:
    """Comma-separated plate list: "45, 10, 2.5"."""
    return ", ".join(format_load(p) for p in plates)


def working_sets(
    training_max: float,
    scheme: WeekScheme,
    round_to: float = DEFAULT_ROUND_TO,
) -> list[WorkingSet]:
    """
    Resolve a week scheme to concrete loads.

    Args:
        training_max: Lifter's TM for the exercise
        scheme: WeekScheme from week_scheme.resolve()
        round_to: Plate increment

    Returns:
        One WorkingSet per main set, in performance order
    """
    return [
        WorkingSet(prescription=p, weight=round_load(training_max * p.percentage, round_to))
        for p in scheme.main_sets
    ]
