"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of program data.
"""

from rich.console import Console
from rich.table import Table

from ..core.loads import format_load, format_plate_list
from ..core.max_estimator import AmrapEstimate, AmrapNote, OneRepMaxFormula
from ..core.models import Exercise, JokerSet, TrainingMaxSet, WarmupStep, WeekScheme, WorkingSet
from ..core.progression import training_max_deltas

console = Console()


def format_week_table(
    week: int,
    scheme: WeekScheme,
    working: list[WorkingSet] | None = None,
) -> Table:
    """
    Create a Rich table for one week's main sets.

    Args:
        week: Week number
        scheme: Resolved week scheme
        working: Concrete loads, if a training max was given

    Returns:
        Rich Table object
    """
    table = Table(title=f"Week {week}: {scheme.display_label}")

    table.add_column("Set", justify="right", style="dim", width=3)
    table.add_column("%TM", justify="right", style="cyan")
    table.add_column("Reps", justify="right", style="bold")
    if working is not None:
        table.add_column("Weight", justify="right", style="green")

    for i, p in enumerate(scheme.main_sets, 1):
        row = [
            str(i),
            f"{p.percentage * 100:.0f}%",
            f"{p.reps}+" if p.is_amrap else str(p.reps),
        ]
        if working is not None:
            row.append(format_load(working[i - 1].weight))
        table.add_row(*row)

    table.caption = "Auxiliary volume: " + ("yes" if scheme.include_auxiliary_volume else "no (deload)")
    return table


def format_training_max_table(
    before: TrainingMaxSet,
    after: TrainingMaxSet,
    active: set[Exercise],
    policy_name: str,
) -> Table:
    """
    Create a Rich table comparing two training max sets.

    Args:
        before: Current training maxes
        after: Next cycle's training maxes
        active: Exercises that were progressed
        policy_name: Policy label for the title

    Returns:
        Rich Table object
    """
    table = Table(title=f"Next cycle ({policy_name})")

    table.add_column("Lift", style="cyan")
    table.add_column("Region", style="magenta")
    table.add_column("Current", justify="right")
    table.add_column("Next", justify="right", style="bold")
    table.add_column("Change", justify="right", style="green")

    deltas = training_max_deltas(before, after)
    for ex in Exercise:
        delta = deltas[ex]
        table.add_row(
            ex.label,
            ex.body_region.value,
            format_load(before[ex]),
            format_load(after[ex]),
            f"+{format_load(delta)}" if ex in active else "-",
        )

    return table


def format_estimate(weight: float, reps: int, formula: OneRepMaxFormula, est: AmrapEstimate) -> str:
    """Format an AMRAP estimate as a text block."""
    lines = [f"{format_load(weight)} × {reps} ({formula.display_name})"]
    if est.note is AmrapNote.INVALID_TOO_MANY_REPS:
        lines.append(f"- No estimate: {reps} reps is above the rep cap")
        return "\n".join(lines)
    lines.append(f"- e1RM: {format_load(est.e1rm)}")
    if est.note is AmrapNote.LOW_CONFIDENCE:
        lines.append("- Low confidence: estimates from this many reps are less reliable")
    elif est.note is AmrapNote.CAPPED:
        lines.append(f"- Computed at the cap of {est.reps_used} reps")
    return "\n".join(lines)


def format_warmup_table(steps: list[WarmupStep], target: float) -> Table:
    """Create a Rich table for a warm-up ramp."""
    table = Table(title=f"Warm-up to {format_load(target)}")

    table.add_column("Step", justify="right", style="dim", width=4)
    table.add_column("Weight", justify="right", style="green")
    table.add_column("Reps", justify="right", style="bold")

    for i, step in enumerate(steps, 1):
        table.add_row(str(i), format_load(step.weight), str(step.reps))

    return table


def format_joker_table(jokers: list[JokerSet]) -> Table:
    """Create a Rich table for joker sets."""
    table = Table(title="Joker sets")

    table.add_column("%TM", justify="right", style="cyan")
    table.add_column("Reps", justify="right", style="bold")
    table.add_column("Weight", justify="right", style="green")

    for j in jokers:
        table.add_row(f"{j.percentage * 100:.0f}%", str(j.reps), format_load(j.weight))

    return table


def format_plates(target: float, bar: float, plates: list[float]) -> str:
    """Format a plate breakdown line."""
    if not plates:
        return f"{format_load(target)}: bar only ({format_load(bar)})"
    return f"{format_load(target)}: per side {format_plate_list(plates)}"


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")
