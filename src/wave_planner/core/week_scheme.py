"""
Week scheme resolution for the 4-week wave.

Maps a week number to the main-lift prescription for that week. The table
is static; any week that is not 2, 3 or 4 gets the 5s scheme, so the
function is total over all integers.
"""

from .config import CYCLE_WEEKS, DELOAD_WEEK
from .models import SetPrescription, WeekKind, WeekScheme

FIVES_SCHEME = WeekScheme(
    main_sets=(
        SetPrescription(percentage=0.65, reps=5),
        SetPrescription(percentage=0.75, reps=5),
        SetPrescription(percentage=0.85, reps=5, is_amrap=True),
    ),
    include_auxiliary_volume=True,
    display_label="85% × 5+",
)

WEEK_SCHEMES: dict[int, WeekScheme] = {
    2: WeekScheme(
        main_sets=(
            SetPrescription(percentage=0.70, reps=3),
            SetPrescription(percentage=0.80, reps=3),
            SetPrescription(percentage=0.90, reps=3, is_amrap=True),
        ),
        include_auxiliary_volume=True,
        display_label="90% × 3+",
    ),
    3: WeekScheme(
        main_sets=(
            SetPrescription(percentage=0.75, reps=5),
            SetPrescription(percentage=0.85, reps=3),
            SetPrescription(percentage=0.95, reps=1, is_amrap=True),
        ),
        include_auxiliary_volume=True,
        display_label="95% × 1+",
    ),
    DELOAD_WEEK: WeekScheme(
        main_sets=(
            SetPrescription(percentage=0.40, reps=5),
            SetPrescription(percentage=0.50, reps=5),
            SetPrescription(percentage=0.60, reps=5),
        ),
        include_auxiliary_volume=False,
        display_label="Deload: 60% × 5",
    ),
}

_WEEK_KINDS: dict[int, WeekKind] = {
    2: WeekKind.THREE,
    3: WeekKind.ONE,
}


def resolve(week: int) -> WeekScheme:
    """
    Return the prescribed scheme for a week.

    Weeks 2, 3 and 4 have their own schemes. Every other value, including
    week 1, zero, negatives and anything past the cycle, resolves to the
    5s scheme.

    Args:
        week: Week number (1-indexed within the cycle)

    Returns:
        WeekScheme for that week
    """
    return WEEK_SCHEMES.get(week, FIVES_SCHEME)


def is_deload(week: int) -> bool:
    """True for the deload week."""
    return week == DELOAD_WEEK


def week_kind(week: int) -> WeekKind:
    """Rep family of the week: 3s on week 2, 1s on week 3, 5s otherwise."""
    return _WEEK_KINDS.get(week, WeekKind.FIVE)


def cycle_schemes() -> list[tuple[int, WeekScheme]]:
    """All weeks of one cycle in order, as (week, scheme) pairs."""
    return [(week, resolve(week)) for week in range(1, CYCLE_WEEKS + 1)]
