"""Calculator commands: e1rm, plates, warmup, joker."""

import json
from dataclasses import replace
from typing import Annotated, Optional

import typer

from ...core.joker import generate_jokers
from ...core.loads import PlateCalculator
from ...core.max_estimator import OneRepMaxFormula, estimate_1rm
from ...core.warmup import build_warmup_plan, suggested_movement
from ...core.week_scheme import week_kind
from ...io.serializers import ValidationError, parse_exercise
from .. import views
from ..app import BarOption, JsonOption, RoundToOption, app, get_settings, require_finite


@app.command("e1rm")
def e1rm(
    weight: Annotated[float, typer.Argument(help="Load lifted on the AMRAP set")],
    reps: Annotated[int, typer.Argument(help="Reps completed")],
    formula: Annotated[
        Optional[OneRepMaxFormula],
        typer.Option("--formula", "-f", help="epley, brzycki or mayhew (default from program.yaml)"),
    ] = None,
    allow_high_reps: Annotated[
        bool,
        typer.Option("--allow-high-reps", help="Estimate at the rep cap instead of refusing"),
    ] = False,
    round_to: RoundToOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Estimate a one-rep-max from an AMRAP set.
    """
    require_finite(weight=weight, round_to=round_to)
    settings = get_settings()
    chosen = formula if formula is not None else settings.one_rm_formula
    step = round_to if round_to is not None else settings.round_to

    est = estimate_1rm(
        weight,
        reps,
        formula=chosen,
        refuse_above_hard_cap=not allow_high_reps,
        round_to=step,
    )

    if json_out:
        print(json.dumps({
            "weight": weight,
            "reps": reps,
            "formula": chosen.value,
            "e1rm": est.e1rm,
            "note": est.note.value,
            "reps_used": est.reps_used,
        }, indent=2))
        return

    views.console.print()
    views.console.print(views.format_estimate(weight, reps, chosen, est))
    views.console.print()


@app.command()
def plates(
    target: Annotated[float, typer.Argument(help="Total weight on the bar")],
    bar: BarOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show the plates to load per side.
    """
    require_finite(target=target, bar=bar)
    settings = get_settings()
    bar_weight = bar if bar is not None else settings.bar_weight
    calc = PlateCalculator(bar_weight, settings.round_to, settings.plate_inventory)

    if target < bar_weight:
        views.print_error(f"Target {target} is lighter than the bar ({bar_weight})")
        raise typer.Exit(1)

    per_side = calc.plates(target)

    if json_out:
        print(json.dumps({"target": target, "bar": bar_weight, "per_side": per_side}, indent=2))
        return

    views.console.print(views.format_plates(target, bar_weight, per_side))
    loaded = bar_weight + 2 * sum(per_side)
    if abs(loaded - target) > 1e-6:
        views.print_warning(f"Closest loadable weight is {loaded:g}")


@app.command()
def warmup(
    target: Annotated[float, typer.Argument(help="First working-set weight")],
    exercise: Annotated[
        Optional[str],
        typer.Option("--exercise", "-e", help="Lift, for a general warm-up suggestion"),
    ] = None,
    bar: BarOption = None,
    round_to: RoundToOption = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show a short warm-up ramp to the first working set.
    """
    require_finite(target=target, bar=bar, round_to=round_to)
    settings = get_settings()
    bar_weight = bar if bar is not None else settings.bar_weight
    step = round_to if round_to is not None else settings.round_to

    movement = None
    if exercise is not None:
        try:
            movement = suggested_movement(parse_exercise(exercise))
        except ValidationError as e:
            views.print_error(str(e))
            raise typer.Exit(1)

    steps = build_warmup_plan(target, bar_weight, step)

    if json_out:
        print(json.dumps({
            "target": target,
            "movement": movement,
            "steps": [{"weight": s.weight, "reps": s.reps} for s in steps],
        }, indent=2))
        return

    views.console.print()
    if movement:
        views.print_info(f"General: {movement}")
    views.console.print(views.format_warmup_table(steps, target))
    views.console.print()


@app.command()
def joker(
    week_number: Annotated[int, typer.Argument(help="Week of the cycle")],
    training_max: Annotated[float, typer.Argument(help="Training max for the lift")],
    max_over_tm: Annotated[
        Optional[float],
        typer.Option("--max-over", help="Joker ceiling above TM as a fraction (hard limit 0.20)"),
    ] = None,
    json_out: JsonOption = False,
) -> None:
    """
    Show joker sets available after the AMRAP set.
    """
    require_finite(training_max=training_max, max_over_tm=max_over_tm)
    params = get_settings().joker
    if max_over_tm is not None:
        params = replace(params, max_over_tm=max_over_tm)

    kind = week_kind(week_number)
    jokers = generate_jokers(training_max, kind, params)

    if json_out:
        print(json.dumps({
            "week": week_number,
            "kind": kind.value,
            "sets": [{"percentage": j.percentage, "reps": j.reps, "weight": j.weight} for j in jokers],
        }, indent=2))
        return

    if not jokers:
        views.print_info("No joker sets this week.")
        return

    views.console.print()
    views.console.print(views.format_joker_table(jokers))
    views.console.print()
