"""
Run configuration.

A run config is an optional YAML file::

    inputs_dir: inputs        # relative to the config file
    days: [8]                 # omit to run every registered day

load_config() turns it into a frozen RunConfig. Command-line flags override
individual fields via RunConfig.with_overrides().
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

import yaml

DEFAULT_INPUTS_DIR = Path("inputs")


class ConfigError(ValueError):
    """Raised when a run config file is malformed."""


@dataclass(frozen=True)
class RunConfig:
    """
    Settings for one runner invocation.

    Attributes:
        inputs_dir: Directory holding one input file per day, named by day number.
        days: Days to run, or None for every registered day.
    """

    inputs_dir: Path = DEFAULT_INPUTS_DIR
    days: Optional[tuple[int, ...]] = None

    def __post_init__(self) -> None:
        if self.days is not None:
            for day in self.days:
                if day <= 0:
                    raise ValueError(f"days must be positive, got {day}")

    def with_overrides(
        self,
        inputs_dir: Optional[Path] = None,
        days: Optional[tuple[int, ...]] = None,
    ) -> RunConfig:
        """Return a copy with any non-None argument replacing the stored value."""
        config = self
        if inputs_dir is not None:
            config = replace(config, inputs_dir=inputs_dir)
        if days is not None:
            config = replace(config, days=days)
        return config


def load_config(path: Path) -> RunConfig:
    """
    Load a RunConfig from a YAML file.

    Raises ConfigError for unreadable YAML, unknown keys or wrongly typed
    values. A relative ``inputs_dir`` is resolved against the file's directory.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"{path}: cannot read config: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")

    unknown = sorted(set(data) - {"inputs_dir", "days"})
    if unknown:
        raise ConfigError(f"{path}: unknown keys: {', '.join(unknown)}")

    raw_inputs_dir = data.get("inputs_dir", str(DEFAULT_INPUTS_DIR))
    if not isinstance(raw_inputs_dir, str):
        raise ConfigError(f"{path}: inputs_dir must be a string")
    inputs_dir = Path(raw_inputs_dir)
    if not inputs_dir.is_absolute():
        inputs_dir = path.parent / inputs_dir

    raw_days = data.get("days")
    days: Optional[tuple[int, ...]] = None
    if raw_days is not None:
        if not isinstance(raw_days, list) or not all(
            isinstance(d, int) and not isinstance(d, bool) for d in raw_days
        ):
            raise ConfigError(f"{path}: days must be a list of integers")
        days = tuple(raw_days)

    try:
        return RunConfig(inputs_dir=inputs_dir, days=days)
    except ValueError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
