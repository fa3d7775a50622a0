"""
Configuration constants for the wave-cycle training model.

All adjustable parameters are centralized here for easy tuning.
User-facing program settings (bar, plates, rounding) are loaded from
program.yaml by engine/config_loader.py; the values below are the defaults.
"""

from typing import Final

# =============================================================================
# CYCLE LAYOUT
# =============================================================================

CYCLE_WEEKS: Final[int] = 4  # Weeks per wave
DELOAD_WEEK: Final[int] = 4  # Week with no AMRAP and no auxiliary volume

# =============================================================================
# CLASSIC PROGRESSION
# =============================================================================

UPPER_BODY_INCREMENT: Final[float] = 5.0   # Per-cycle TM bump, upper body
LOWER_BODY_INCREMENT: Final[float] = 10.0  # Per-cycle TM bump, lower body

# =============================================================================
# AUTO PROGRESSION
# =============================================================================

AUTO_TM_FACTOR: Final[float] = 0.90           # Target TM as fraction of best e1RM
AUTO_MIN_DELTA_FACTOR: Final[float] = 0.5     # Floor, as multiple of classic increment
AUTO_MAX_DELTA_FACTOR: Final[float] = 2.0     # Cap, as multiple of classic increment
AUTO_NO_DATA_BUMP_FACTOR: Final[float] = 0.5  # Bump when no AMRAP data exists

# =============================================================================
# AMRAP ESTIMATION
# =============================================================================

E1RM_SOFT_WARN_REPS: Final[int] = 11  # Estimates from this many reps are low-confidence
E1RM_HARD_CAP_REPS: Final[int] = 15   # Above this, refuse or cap
E1RM_ROUND_TO: Final[float] = 5.0     # Estimates are rounded to this step
BRZYCKI_MAX_REPS: Final[int] = 36     # Keeps 37 - r away from zero

# =============================================================================
# LOADS AND PLATES
# =============================================================================

DEFAULT_BAR_WEIGHT: Final[float] = 45.0
DEFAULT_ROUND_TO: Final[float] = 5.0
FALLBACK_ROUND_TO: Final[float] = 0.5  # Used when a rounding increment is unusable
DEFAULT_PLATE_INVENTORY: Final[list[float]] = [45.0, 35.0, 25.0, 10.0, 5.0, 2.5]
PLATE_EPSILON: Final[float] = 1e-9
MAX_PLATES_PER_DENOMINATION: Final[int] = 200

# =============================================================================
# WARM-UP RAMP
# =============================================================================

WARMUP_BAR_REPS: Final[int] = 10
WARMUP_MAX_STEPS: Final[int] = 4           # Bar + up to 3 ramp sets
WARMUP_SPAN_ONE_STEP: Final[float] = 60.0  # Span below this: one ramp set
WARMUP_SPAN_TWO_STEPS: Final[float] = 120.0  # Span below this: two ramp sets
WARMUP_TEMPLATES: Final[dict[int, list[float]]] = {
    1: [0.70],
    2: [0.55, 0.75],
    3: [0.50, 0.70, 0.85],
}
# (upper bound of fraction of target, reps); last entry catches the rest
WARMUP_REP_BANDS: Final[list[tuple[float, int]]] = [
    (0.60, 8),
    (0.75, 5),
    (0.87, 3),
]
WARMUP_TOP_REPS: Final[int] = 1

# =============================================================================
# JOKER SETS
# =============================================================================

JOKER_TRIPLE_START: Final[float] = 0.95
JOKER_SINGLE_START: Final[float] = 1.00
JOKER_TRIPLE_STEP: Final[float] = 0.05
JOKER_SINGLE_STEP: Final[float] = 0.10
JOKER_MAX_OVER_TM: Final[float] = 0.10
JOKER_HARD_CEILING: Final[float] = 1.20  # Never above 120% TM
