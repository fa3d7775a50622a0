"""
CLI entry point using Typer.

Provides commands for the wave cycle:
- week: Main-set scheme for one week
- cycle: All four weeks
- advance: Next cycle's training maxes
- e1rm: Estimated 1RM from an AMRAP set
- plates: Per-side plate breakdown
- warmup: Warm-up ramp to the first working set
- joker: Joker sets after the AMRAP set
"""

from .app import app
from .commands import program, tools  # noqa: F401  (registers commands)

__all__ = ["app"]


if __name__ == "__main__":
    app()
