"""
Data models for wave-planner.

Exercises, prescriptions, week schemes, training maxes and performance
records. Everything except TrainingMaxSet is immutable.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class BodyRegion(str, Enum):
    """Body-region class of an exercise; selects increment magnitudes."""

    UPPER = "upper"
    LOWER = "lower"


class Exercise(str, Enum):
    """The closed set of main lifts. Values are the external short codes."""

    SQUAT = "SQ"
    BENCH = "BP"
    DEADLIFT = "DL"
    ROW = "RW"
    PRESS = "PR"

    @property
    def code(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Display label, e.g. "Squat"."""
        return _LABELS[self]

    @property
    def body_region(self) -> BodyRegion:
        return body_region(self)

    @property
    def is_upper_body(self) -> bool:
        return body_region(self) is BodyRegion.UPPER


_LABELS: dict[Exercise, str] = {
    Exercise.SQUAT: "Squat",
    Exercise.BENCH: "Bench",
    Exercise.DEADLIFT: "Deadlift",
    Exercise.ROW: "Row",
    Exercise.PRESS: "Press",
}

_BODY_REGIONS: dict[Exercise, BodyRegion] = {
    Exercise.SQUAT: BodyRegion.LOWER,
    Exercise.BENCH: BodyRegion.UPPER,
    Exercise.DEADLIFT: BodyRegion.LOWER,
    Exercise.ROW: BodyRegion.UPPER,
    Exercise.PRESS: BodyRegion.UPPER,
}


def body_region(exercise: Exercise) -> BodyRegion:
    """
    Classify an exercise as upper or lower body.

    The classification is fixed per exercise and never depends on history
    or progression policy.

    Args:
        exercise: Exercise to classify

    Returns:
        BodyRegion.UPPER or BodyRegion.LOWER
    """
    return _BODY_REGIONS[exercise]


class ProgressionPolicy(str, Enum):
    """How the training max moves between cycles."""

    CLASSIC = "classic"  # fixed +5 / +10 per cycle
    AUTO = "auto"        # ~90% of best AMRAP estimate, floored and capped


class WeekKind(str, Enum):
    """Rep scheme family of a week (5s, 3s, 1s)."""

    FIVE = "five"
    THREE = "three"
    ONE = "one"


@dataclass(frozen=True)
class SetPrescription:
    """One prescribed set: percentage of training max, target reps, AMRAP flag."""

    percentage: float  # fraction of TM, e.g. 0.85
    reps: int
    is_amrap: bool = False

    def __str__(self) -> str:
        plus = "+" if self.is_amrap else ""
        return f"{self.percentage * 100:.0f}% × {self.reps}{plus}"


@dataclass(frozen=True)
class WeekScheme:
    """
    The main-lift prescription for one week.

    main_sets always holds three prescriptions ordered lightest to
    heaviest; only the last may be AMRAP.
    """

    main_sets: tuple[SetPrescription, ...]
    include_auxiliary_volume: bool
    display_label: str

    @property
    def top_set(self) -> SetPrescription:
        """The heaviest (last) prescribed set."""
        return self.main_sets[-1]

    @property
    def has_amrap(self) -> bool:
        return any(s.is_amrap for s in self.main_sets)


@dataclass(frozen=True)
class PerformanceRecord:
    """
    One historical AMRAP result.

    A record whose estimated_1rm is not positive is treated as absent data.
    """

    exercise: Exercise
    estimated_1rm: float
    date: str | None = None  # ISO format: YYYY-MM-DD, informational only


@dataclass
class TrainingMaxSet:
    """
    Current training max per exercise.

    Every exercise must be present; the constructor rejects partial maps
    so lookups never miss.
    """

    values: dict[Exercise, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate that every exercise has a value."""
        missing = [ex.label for ex in Exercise if ex not in self.values]
        if missing:
            raise ValueError(f"TrainingMaxSet missing exercises: {', '.join(missing)}")
        extra = [k for k in self.values if not isinstance(k, Exercise)]
        if extra:
            raise ValueError(f"TrainingMaxSet has non-exercise keys: {extra}")
        self.values = {ex: float(self.values[ex]) for ex in Exercise}

    @classmethod
    def from_values(
        cls,
        squat: float,
        bench: float,
        deadlift: float,
        row: float,
        press: float,
    ) -> "TrainingMaxSet":
        """Build a set from one value per exercise."""
        return cls({
            Exercise.SQUAT: squat,
            Exercise.BENCH: bench,
            Exercise.DEADLIFT: deadlift,
            Exercise.ROW: row,
            Exercise.PRESS: press,
        })

    def __getitem__(self, exercise: Exercise) -> float:
        return self.values[exercise]

    def __setitem__(self, exercise: Exercise, value: float) -> None:
        if not isinstance(exercise, Exercise):
            raise KeyError(exercise)
        self.values[exercise] = float(value)

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def items(self):
        return self.values.items()

    def copy(self) -> "TrainingMaxSet":
        return TrainingMaxSet(dict(self.values))


# ---------------------------------------------------------------------------
# Supporting value types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WorkingSet:
    """A prescription resolved to a concrete load for one lifter."""

    prescription: SetPrescription
    weight: float


@dataclass(frozen=True)
class WarmupStep:
    """A single warm-up set on the way to the first working set."""

    weight: float
    reps: int


@dataclass(frozen=True)
class JokerSet:
    """An optional heavy set performed after the AMRAP set."""

    percentage: float  # fraction of TM, e.g. 1.05
    reps: int          # 3 (triples) or 1 (singles)
    weight: float      # already rounded to the plate increment
