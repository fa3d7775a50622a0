"""
YAML → typed program settings loader.

Loads user-tunable program settings from program.yaml (bundled with the
package) and optionally merges user overrides from
~/.wave-planner/program.yaml.

Usage:
    from wave_planner.core.engine.config_loader import load_program_settings
    settings = load_program_settings()
    calc = PlateCalculator(settings.bar_weight, settings.round_to, settings.plate_inventory)

If the bundled YAML cannot be parsed, all values fall back to the Python
defaults from config.py.  If the user override file exists but has parse
errors, a warning is issued and the file is ignored.
"""

from __future__ import annotations

import importlib.resources
import math
import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..config import (
    DEFAULT_BAR_WEIGHT,
    DEFAULT_PLATE_INVENTORY,
    DEFAULT_ROUND_TO,
    JOKER_MAX_OVER_TM,
    JOKER_SINGLE_STEP,
    JOKER_TRIPLE_STEP,
)
from ..joker import JokerParams
from ..max_estimator import OneRepMaxFormula
from ..models import ProgressionPolicy


@dataclass(frozen=True)
class ProgramSettings:
    """Program settings consumed by the CLI; the pure core never reads these."""

    bar_weight: float = DEFAULT_BAR_WEIGHT
    round_to: float = DEFAULT_ROUND_TO
    plate_inventory: tuple[float, ...] = tuple(DEFAULT_PLATE_INVENTORY)
    one_rm_formula: OneRepMaxFormula = OneRepMaxFormula.EPLEY
    progression_policy: ProgressionPolicy = ProgressionPolicy.CLASSIC
    joker: JokerParams = field(default_factory=JokerParams)

    def __post_init__(self) -> None:
        """Validate bar weight and rounding increment."""
        if not (math.isfinite(self.bar_weight) and self.bar_weight > 0):
            raise ValueError(f"bar weight must be positive, got {self.bar_weight}")
        if not (math.isfinite(self.round_to) and self.round_to > 0):
            raise ValueError(f"round_to must be positive, got {self.round_to}")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_yaml_file(path: Path) -> dict[str, Any] | None:
    """Load a single YAML file; None if unreadable or not a mapping."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge *override* into *base* (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def settings_from_dict(data: dict[str, Any]) -> ProgramSettings:
    """
    Convert a merged config dict to ProgramSettings.

    Missing keys keep their defaults.

    Raises:
        ValueError: If a value has the wrong type or an unknown enum name
    """
    defaults = ProgramSettings()
    bar = data.get("bar", {}) or {}
    progression = data.get("progression", {}) or {}
    joker = data.get("joker", {}) or {}

    try:
        return ProgramSettings(
            bar_weight=float(bar.get("weight", defaults.bar_weight)),
            round_to=float(bar.get("round_to", defaults.round_to)),
            plate_inventory=tuple(float(p) for p in bar.get("plates", defaults.plate_inventory)),
            one_rm_formula=OneRepMaxFormula(progression.get("one_rm_formula", defaults.one_rm_formula.value)),
            progression_policy=ProgressionPolicy(progression.get("policy", defaults.progression_policy.value)),
            joker=JokerParams(
                triple_step=float(joker.get("triple_step", JOKER_TRIPLE_STEP)),
                single_step=float(joker.get("single_step", JOKER_SINGLE_STEP)),
                max_over_tm=float(joker.get("max_over_tm", JOKER_MAX_OVER_TM)),
                round_to=float(bar.get("round_to", defaults.round_to)),
            ),
        )
    except (TypeError, AttributeError) as exc:
        raise ValueError(f"invalid program settings: {exc}") from exc


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_bundled_yaml_path() -> Path | None:
    """Return the path to the bundled program.yaml, or None if not found."""
    try:
        ref = importlib.resources.files("wave_planner").joinpath("program.yaml")
        with importlib.resources.as_file(ref) as p:
            return p if p.exists() else None
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        candidate = Path(__file__).parent.parent.parent / "program.yaml"
        return candidate if candidate.exists() else None


def get_user_yaml_path() -> Path | None:
    """Return ~/.wave-planner/program.yaml if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".wave-planner" / "program.yaml"
    return p if p.exists() else None


def load_program_config() -> dict[str, Any]:
    """
    Load and merge raw program configuration from YAML sources.

    Load order (later overrides earlier):
    1. Bundled src/wave_planner/program.yaml
    2. User override at ~/.wave-planner/program.yaml

    Returns:
        Merged dict of config sections.  Empty dict if no YAML available.
    """
    config: dict[str, Any] = {}

    bundled = get_bundled_yaml_path()
    if bundled is not None:
        config = _deep_merge(config, _load_yaml_file(bundled) or {})

    user = get_user_yaml_path()
    if user is not None:
        user_cfg = _load_yaml_file(user)
        if user_cfg is None:
            warnings.warn(
                f"wave-planner: ignoring unreadable settings file {user}",
                stacklevel=2,
            )
        else:
            config = _deep_merge(config, user_cfg)

    return config


def load_program_settings() -> ProgramSettings:
    """
    Load typed program settings.

    Falls back to defaults (with a warning) when the merged config holds
    invalid values.
    """
    try:
        return settings_from_dict(load_program_config())
    except ValueError as exc:
        warnings.warn(
            f"wave-planner: invalid program settings ({exc}); using defaults.",
            stacklevel=2,
        )
        return ProgramSettings()
