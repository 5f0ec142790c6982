"""Elo options and their TOML-backed named variants."""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from pathlib import Path
from typing import Any
import tomllib

from match_elo.errors import MatchValidationError
from match_elo.protocol import CalculationStrategy
from match_elo.scoring import DEFAULT_SCALE_FACTOR

DEFAULT_K_FACTOR = 15.0
DEFAULT_STRATEGY = CalculationStrategy.UNIFORM


@dataclass(frozen=True)
class EloOptions:
    k_factor: float = DEFAULT_K_FACTOR
    strategy: CalculationStrategy = DEFAULT_STRATEGY
    scale_factor: float = DEFAULT_SCALE_FACTOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "strategy", CalculationStrategy.parse(self.strategy))
        if not isfinite(self.k_factor) or self.k_factor <= 0.0:
            raise MatchValidationError(f"k_factor must be a positive finite number, got {self.k_factor!r}")
        if not isfinite(self.scale_factor) or self.scale_factor <= 0.0:
            raise MatchValidationError(
                f"scale_factor must be a positive finite number, got {self.scale_factor!r}"
            )


@dataclass(frozen=True)
class EloSystemConfig:
    """One named set of Elo options loaded from disk."""

    name: str
    description: str | None
    file_path: Path
    options: EloOptions

    def as_config_json(self) -> dict[str, Any]:
        return {
            "k_factor": self.options.k_factor,
            "strategy": self.options.strategy.value,
            "scale_factor": self.options.scale_factor,
        }


def load_elo_system_configs(config_dir: Path) -> list[EloSystemConfig]:
    """Load and validate all Elo system TOML config files in a directory."""
    if not config_dir.exists():
        raise FileNotFoundError(f"Config directory not found: {config_dir}")
    if not config_dir.is_dir():
        raise NotADirectoryError(f"Config path is not a directory: {config_dir}")

    config_files = sorted(config_dir.glob("*.toml"))
    if not config_files:
        raise ValueError(f"No .toml config files found in: {config_dir}")

    systems: list[EloSystemConfig] = []
    for file_path in config_files:
        with file_path.open("rb") as file:
            raw = tomllib.load(file)
        systems.append(_parse_elo_system_config(raw, file_path))

    names = [system.name for system in systems]
    if len(names) != len(set(names)):
        raise ValueError(f"Duplicate elo system names found in {config_dir}: {names}")

    return systems


def find_elo_system_config(config_dir: Path, name: str) -> EloSystemConfig:
    for system in load_elo_system_configs(config_dir):
        if system.name == name:
            return system
    raise ValueError(f"No elo system named {name!r} in {config_dir}")


def _parse_elo_system_config(raw: dict[str, Any], file_path: Path) -> EloSystemConfig:
    system_raw = raw.get("system", {})
    elo_raw = raw.get("elo", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    try:
        options = EloOptions(
            k_factor=float(elo_raw.get("k_factor", DEFAULT_K_FACTOR)),
            strategy=CalculationStrategy.parse(elo_raw.get("strategy", DEFAULT_STRATEGY)),
            scale_factor=float(elo_raw.get("scale_factor", DEFAULT_SCALE_FACTOR)),
        )
    except MatchValidationError as exc:
        raise ValueError(f"{file_path}: [elo] {exc}") from exc

    return EloSystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        options=options,
    )


__all__ = [
    "DEFAULT_K_FACTOR",
    "DEFAULT_STRATEGY",
    "EloOptions",
    "EloSystemConfig",
    "find_elo_system_config",
    "load_elo_system_configs",
]
