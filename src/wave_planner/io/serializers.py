"""
JSON serialization for wave-planner models.

Handles conversion between dataclasses and JSON-compatible dicts, and the
compact "name=value" strings accepted on the command line. Exercise names
are converted to the typed Exercise enum here and nowhere else.
"""

import json
import math
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.models import (
    Exercise,
    PerformanceRecord,
    TrainingMaxSet,
    WeekScheme,
    WorkingSet,
)


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def validate_date(date_str: str) -> str:
    """
    Validate and normalize date string to ISO format.

    Args:
        date_str: Date string to validate

    Returns:
        Normalized YYYY-MM-DD string

    Raises:
        ValidationError: If date format is invalid
    """
    if not re.match(r"^\d{4}-\d{2}-\d{2}$", date_str):
        raise ValidationError(f"Invalid date format: {date_str}. Expected YYYY-MM-DD")

    try:
        datetime.strptime(date_str, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(f"Invalid date: {date_str}") from e

    return date_str


def validate_finite(value: float, name: str) -> float:
    """
    Reject NaN and infinite loads.

    Raises:
        ValidationError: If value is not a finite number
    """
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be a finite number, got {value}")
    return value


def parse_exercise(name: str) -> Exercise:
    """
    Resolve an exercise from its code, label or enum name.

    Accepts "SQ", "Squat", "squat", "SQUAT" and so on.

    Args:
        name: Exercise identifier

    Returns:
        Exercise

    Raises:
        ValidationError: If the name matches no exercise
    """
    key = name.strip().lower() if isinstance(name, str) else ""
    for ex in Exercise:
        if key in (ex.code.lower(), ex.label.lower(), ex.name.lower()):
            return ex
    valid = ", ".join(ex.label.lower() for ex in Exercise)
    raise ValidationError(f"Unknown exercise {name!r}. Valid: {valid}")


def parse_exercise_list(text: str) -> set[Exercise]:
    """
    Parse a comma-separated exercise list ("squat,bench").

    "all" selects every exercise.
    """
    if text.strip().lower() == "all":
        return set(Exercise)
    parts = [p for p in (s.strip() for s in text.split(",")) if p]
    if not parts:
        raise ValidationError("Exercise list is empty")
    return {parse_exercise(p) for p in parts}


def parse_assignments(text: str) -> list[tuple[Exercise, float]]:
    """
    Parse "squat=315,bench=225" into (exercise, value) pairs.

    Raises:
        ValidationError: On a missing '=' or a non-numeric value
    """
    pairs: list[tuple[Exercise, float]] = []
    for chunk in text.split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        if "=" not in chunk:
            raise ValidationError(f"Expected name=value, got {chunk!r}")
        name, raw = chunk.split("=", 1)
        try:
            value = float(raw)
        except ValueError as e:
            raise ValidationError(f"Invalid number for {name.strip()}: {raw!r}") from e
        validate_finite(value, name.strip())
        pairs.append((parse_exercise(name), value))
    return pairs


def parse_training_maxes(text: str) -> TrainingMaxSet:
    """
    Parse a complete TM list, e.g. "squat=315,bench=225,deadlift=405,row=185,press=135".

    Raises:
        ValidationError: If any exercise is missing
    """
    values = dict(parse_assignments(text))
    try:
        return TrainingMaxSet(values)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def training_max_set_to_dict(tms: TrainingMaxSet) -> dict[str, float]:
    """Convert TrainingMaxSet to {label: value}."""
    return {ex.label: value for ex, value in tms.items()}


def dict_to_training_max_set(data: dict[str, Any]) -> TrainingMaxSet:
    """
    Convert {name: value} to TrainingMaxSet.

    Raises:
        ValidationError: If data is invalid or incomplete
    """
    if not isinstance(data, dict):
        raise ValidationError("Training maxes must be a JSON object")
    values: dict[Exercise, float] = {}
    for name, raw in data.items():
        try:
            values[parse_exercise(name)] = validate_finite(float(raw), name)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid training max for {name}: {raw!r}") from e
    try:
        return TrainingMaxSet(values)
    except ValueError as e:
        raise ValidationError(str(e)) from e


def performance_record_to_dict(record: PerformanceRecord) -> dict[str, Any]:
    """
    Convert PerformanceRecord to JSON-compatible dict.

    Args:
        record: Record to convert

    Returns:
        Dict representation (exercise stored by label)
    """
    d: dict[str, Any] = {
        "exercise": record.exercise.label,
        "estimated_1rm": record.estimated_1rm,
    }
    if record.date is not None:
        d["date"] = record.date
    return d


def dict_to_performance_record(data: dict[str, Any]) -> PerformanceRecord:
    """
    Convert dict to PerformanceRecord.

    Accepts "estimated_1rm" or the short "e1rm" key. Non-positive values are
    kept; the progression engine treats them as absent data.

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Record must be a JSON object, got {type(data).__name__}")
    if "exercise" not in data:
        raise ValidationError("Record is missing 'exercise'")
    raw = data.get("estimated_1rm", data.get("e1rm"))
    if raw is None:
        raise ValidationError("Record is missing 'estimated_1rm'")
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid estimated_1rm: {raw!r}") from e
    validate_finite(value, "estimated_1rm")

    date = data.get("date")
    return PerformanceRecord(
        exercise=parse_exercise(data["exercise"]),
        estimated_1rm=value,
        date=validate_date(str(date)) if date is not None else None,
    )


def load_records(path: Path) -> list[PerformanceRecord]:
    """
    Read performance records from a JSON array or a JSONL file.

    Args:
        path: File to read

    Returns:
        Records in file order

    Raises:
        ValidationError: If the file is missing or malformed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ValidationError(f"Cannot read records file {path}: {e}") from e

    stripped = text.strip()
    if not stripped:
        return []

    try:
        if stripped.startswith("["):
            items = json.loads(stripped)
        else:
            items = [json.loads(line) for line in stripped.splitlines() if line.strip()]
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in {path}: {e}") from e

    return [dict_to_performance_record(item) for item in items]


def week_scheme_to_dict(
    week: int,
    scheme: WeekScheme,
    working: list[WorkingSet] | None = None,
) -> dict[str, Any]:
    """Convert a week scheme (and optional loads) to a JSON-compatible dict."""
    sets = []
    for i, p in enumerate(scheme.main_sets):
        s: dict[str, Any] = {
            "percentage": p.percentage,
            "reps": p.reps,
            "amrap": p.is_amrap,
        }
        if working is not None:
            s["weight"] = working[i].weight
        sets.append(s)
    return {
        "week": week,
        "label": scheme.display_label,
        "auxiliary_volume": scheme.include_auxiliary_volume,
        "sets": sets,
    }
