"""Tests for TOML-based Elo system config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from match_elo import CalculationStrategy
from match_elo.config import find_elo_system_config, load_elo_system_configs

ROOT_DIR = Path(__file__).resolve().parents[1]


def test_load_elo_system_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "default.toml"
    config_path.write_text(
        """
[system]
name = "system_a"
description = "A test system"

[elo]
k_factor = 24.0
strategy = "weighted"
scale_factor = 420.0
""".strip()
    )

    configs = load_elo_system_configs(tmp_path)
    assert len(configs) == 1

    system = configs[0]
    assert system.name == "system_a"
    assert system.description == "A test system"
    assert system.file_path == config_path
    assert system.options.k_factor == pytest.approx(24.0)
    assert system.options.strategy is CalculationStrategy.WEIGHTED
    assert system.options.scale_factor == pytest.approx(420.0)
    assert system.as_config_json() == {
        "k_factor": 24.0,
        "strategy": "weighted",
        "scale_factor": 420.0,
    }


def test_missing_elo_table_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "bare.toml").write_text('[system]\nname = "bare"\n')

    system = load_elo_system_configs(tmp_path)[0]
    assert system.description is None
    assert system.options.k_factor == pytest.approx(15.0)
    assert system.options.strategy is CalculationStrategy.UNIFORM
    assert system.options.scale_factor == pytest.approx(400.0)


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = """
[system]
name = "dup"

[elo]
k_factor = 20.0
"""
    (tmp_path / "a.toml").write_text(template.strip())
    (tmp_path / "b.toml").write_text(template.strip())

    with pytest.raises(ValueError, match="Duplicate elo system names"):
        load_elo_system_configs(tmp_path)


def test_missing_name_raises_error(tmp_path: Path) -> None:
    (tmp_path / "nameless.toml").write_text("[elo]\nk_factor = 20.0\n")

    with pytest.raises(ValueError, match=r"\[system\].name is required"):
        load_elo_system_configs(tmp_path)


@pytest.mark.parametrize(
    "elo_table",
    [
        "k_factor = 0.0",
        "k_factor = -3.0",
        "scale_factor = 0.0",
        'strategy = "individual"',
    ],
)
def test_invalid_parameters_raise_error(tmp_path: Path, elo_table: str) -> None:
    config_path = tmp_path / "invalid.toml"
    config_path.write_text(f'[system]\nname = "invalid"\n\n[elo]\n{elo_table}\n')

    with pytest.raises(ValueError, match="invalid.toml"):
        load_elo_system_configs(tmp_path)


def test_missing_or_empty_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_elo_system_configs(tmp_path / "missing")
    with pytest.raises(ValueError, match="No .toml config files"):
        load_elo_system_configs(tmp_path)


def test_bundled_configs_load() -> None:
    config_dir = ROOT_DIR / "configs" / "elo"
    names = {system.name for system in load_elo_system_configs(config_dir)}
    assert names == {"default", "weighted"}
    assert find_elo_system_config(config_dir, "weighted").options.strategy is CalculationStrategy.WEIGHTED


def test_unknown_system_name_raises(tmp_path: Path) -> None:
    (tmp_path / "only.toml").write_text('[system]\nname = "only"\n')
    with pytest.raises(ValueError, match="No elo system named 'other'"):
        find_elo_system_config(tmp_path, "other")


def test_config_path_that_is_a_file_raises(tmp_path: Path) -> None:
    config_file = tmp_path / "default.toml"
    config_file.write_text('[system]\nname = "default"\n')
    with pytest.raises(NotADirectoryError):
        load_elo_system_configs(config_file)
