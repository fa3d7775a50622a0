"""Program commands: week, cycle, advance."""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from ...core.loads import working_sets
from ...core.models import Exercise, PerformanceRecord, ProgressionPolicy
from ...core.progression import advance as advance_training_maxes
from ...core.week_scheme import cycle_schemes, resolve
from ...io.serializers import (
    ValidationError,
    load_records,
    parse_assignments,
    parse_exercise_list,
    parse_training_maxes,
    performance_record_to_dict,
    training_max_set_to_dict,
    week_scheme_to_dict,
)
from .. import views
from ..app import JsonOption, RoundToOption, app, get_settings, require_finite


@app.command()
def week(
    week_number: Annotated[
        int,
        typer.Argument(help="Week of the cycle (1-4; anything else gets the 5s scheme)"),
    ],
    training_max: Annotated[
        Optional[float],
        typer.Option("--tm", help="Training max to compute working weights"),
    ] = None,
    round_to: RoundToOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show the main-set scheme for a week.
    """
    require_finite(training_max=training_max, round_to=round_to)
    scheme = resolve(week_number)
    working = None
    if training_max is not None:
        step = round_to if round_to is not None else get_settings().round_to
        working = working_sets(training_max, scheme, step)

    if json_out:
        print(json.dumps(week_scheme_to_dict(week_number, scheme, working), indent=2))
        return

    views.console.print()
    views.console.print(views.format_week_table(week_number, scheme, working))
    views.console.print()


@app.command()
def cycle(
    training_max: Annotated[
        Optional[float],
        typer.Option("--tm", help="Training max to compute working weights"),
    ] = None,
    round_to: RoundToOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show all four weeks of a cycle.
    """
    require_finite(training_max=training_max, round_to=round_to)
    step = round_to if round_to is not None else get_settings().round_to
    weeks = []
    for number, scheme in cycle_schemes():
        working = working_sets(training_max, scheme, step) if training_max is not None else None
        weeks.append((number, scheme, working))

    if json_out:
        print(json.dumps({"weeks": [week_scheme_to_dict(*w) for w in weeks]}, indent=2))
        return

    views.console.print()
    for number, scheme, working in weeks:
        views.console.print(views.format_week_table(number, scheme, working))
    views.console.print()


@app.command()
def advance(
    training_maxes: Annotated[
        str,
        typer.Option("--tm", help="Current TMs: squat=315,bench=225,deadlift=405,row=185,press=135"),
    ],
    policy: Annotated[
        Optional[ProgressionPolicy],
        typer.Option("--policy", help="classic or auto (default from program.yaml)"),
    ] = None,
    active: Annotated[
        str,
        typer.Option("--active", "-a", help="Exercises to progress, comma-separated, or 'all'"),
    ] = "all",
    records_path: Annotated[
        Optional[Path],
        typer.Option("--records", "-r", help="JSON/JSONL file of AMRAP records for last cycle"),
    ] = None,
    record: Annotated[
        Optional[str],
        typer.Option("--record", help="Inline records: squat=340,bench=255 (estimated 1RM)"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Compute next cycle's training maxes.
    """
    chosen = policy if policy is not None else get_settings().progression_policy

    try:
        current = parse_training_maxes(training_maxes)
        active_set = parse_exercise_list(active)
        history: list[PerformanceRecord] = []
        if records_path is not None:
            history.extend(load_records(records_path))
        if record:
            history.extend(
                PerformanceRecord(exercise=ex, estimated_1rm=value)
                for ex, value in parse_assignments(record)
            )
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    updated = advance_training_maxes(current, active_set, chosen, history)

    if json_out:
        print(json.dumps({
            "policy": chosen.value,
            "active": sorted(ex.label for ex in active_set),
            "before": training_max_set_to_dict(current),
            "after": training_max_set_to_dict(updated),
            "records": [performance_record_to_dict(r) for r in history],
        }, indent=2))
        return

    if chosen is ProgressionPolicy.CLASSIC and history:
        views.print_warning("Classic progression ignores AMRAP records.")

    views.console.print()
    views.console.print(views.format_training_max_table(current, updated, active_set, chosen.value))
    untouched = [ex.label for ex in Exercise if ex not in active_set]
    if untouched:
        views.print_info(f"Unchanged: {', '.join(untouched)}")
    views.console.print()
