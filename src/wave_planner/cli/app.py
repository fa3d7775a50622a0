"""Shared Typer app object, shared option types, and settings utility."""

from typing import Annotated, Optional

import typer

from ..core.engine.config_loader import ProgramSettings, load_program_settings
from ..io.serializers import ValidationError, validate_finite
from . import views

# Shared --json option type used across all commands
JsonOption = Annotated[
    bool,
    typer.Option("--json", "-j", help="Output as JSON for machine processing"),
]

RoundToOption = Annotated[
    Optional[float],
    typer.Option("--round-to", help="Plate increment (default from program.yaml)"),
]

BarOption = Annotated[
    Optional[float],
    typer.Option("--bar", help="Bar weight (default from program.yaml)"),
]

app = typer.Typer(
    name="wave-planner",
    help="4-week wave (5/3/1-style) program calculator: week schemes and training max progression.",
    no_args_is_help=True,
)


def get_settings() -> ProgramSettings:
    """Program settings from the bundled and user program.yaml files."""
    return load_program_settings()


def require_finite(**values: Optional[float]) -> None:
    """Exit with an error if any given number is NaN or infinite."""
    try:
        for name, value in values.items():
            if value is not None:
                validate_finite(value, name.replace("_", " "))
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)
