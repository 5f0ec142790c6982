"""Command-line front end for rating calculations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any, Optional
import tomllib

import typer

from match_elo.api import (
    calculate_duel,
    calculate_expected_score,
    calculate_free_for_all,
    calculate_multi_team_match,
)
from match_elo.common import Participant, RatingResult, Team
from match_elo.config import DEFAULT_K_FACTOR, EloOptions, find_elo_system_config
from match_elo.errors import MatchValidationError
from match_elo.protocol import CalculationStrategy

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Elo rating updates for duels, free-for-alls and team matches.",
)

KFactorOption = Annotated[
    Optional[float],
    typer.Option("--k-factor", help=f"Rating volatility. Defaults to {DEFAULT_K_FACTOR:g}."),
]
StrategyOption = Annotated[
    Optional[str],
    typer.Option("--strategy", help="Team distribution strategy: uniform or weighted."),
]
ConfigDirOption = Annotated[
    Optional[Path],
    typer.Option("--config-dir", help="Directory of Elo system TOML files."),
]
SystemNameOption = Annotated[
    str,
    typer.Option("--system-name", help="Elo system name from [system].name in --config-dir."),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log per-team deltas."),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_options(
    *,
    k_factor: float | None,
    strategy: str | None,
    config_dir: Path | None,
    system_name: str,
) -> EloOptions:
    """Start from a named config (if any) and apply explicit overrides."""
    base = EloOptions()
    if config_dir is not None:
        try:
            base = find_elo_system_config(config_dir, system_name).options
        except (OSError, ValueError) as exc:
            raise typer.BadParameter(str(exc), param_hint="--config-dir") from exc

    try:
        return EloOptions(
            k_factor=base.k_factor if k_factor is None else k_factor,
            strategy=base.strategy if strategy is None else CalculationStrategy.parse(strategy),
            scale_factor=base.scale_factor,
        )
    except MatchValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc


def parse_participant(value: str) -> Participant:
    """Parse ``ID:RATING``."""
    identifier, separator, rating = value.rpartition(":")
    if not separator:
        raise typer.BadParameter(f"Expected ID:RATING, got {value!r}")
    try:
        return Participant.create(identifier, float(rating))
    except (ValueError, MatchValidationError) as exc:
        raise typer.BadParameter(f"Invalid participant {value!r}: {exc}") from exc


def parse_scored_participant(value: str) -> tuple[Participant, float]:
    """Parse ``ID:RATING:SCORE``."""
    head, separator, score = value.rpartition(":")
    if not separator:
        raise typer.BadParameter(f"Expected ID:RATING:SCORE, got {value!r}")
    try:
        return parse_participant(head), float(score)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid score in {value!r}: {exc}") from exc


def load_match_file(path: Path) -> list[Team]:
    """Read ``[[teams]]`` tables with ``name``, ``score`` and ``players``."""
    with path.open("rb") as file:
        raw = tomllib.load(file)

    teams_raw: list[dict[str, Any]] = raw.get("teams", [])
    if not teams_raw:
        raise ValueError(f"{path}: at least one [[teams]] table is required")

    teams: list[Team] = []
    for index, team_raw in enumerate(teams_raw, start=1):
        name = str(team_raw.get("name", "")).strip()
        if not name:
            raise ValueError(f"{path}: [[teams]] entry {index} is missing name")
        if "score" not in team_raw:
            raise ValueError(f"{path}: team {name!r} is missing score")

        players: list[Participant] = []
        for player_raw in team_raw.get("players", []):
            if isinstance(player_raw, str):
                players.append(parse_participant(player_raw))
            elif isinstance(player_raw, dict):
                players.append(
                    Participant.create(str(player_raw.get("id", "")), float(player_raw.get("rating")))
                )
            else:
                raise ValueError(
                    f"{path}: team {name!r} has a player entry that is neither \"id:rating\" "
                    f"nor a table: {player_raw!r}"
                )
        teams.append(Team.create(name, players, float(team_raw["score"])))
    return teams


def _echo_results(results: list[RatingResult]) -> None:
    for result in sorted(results, key=lambda item: item.identifier):
        typer.echo(
            f"{result.identifier:<20} "
            f"{result.pre_rating:8.0f} -> {result.rating:8.0f} ({result.rating_delta:+d})"
        )


@app.command()
def expected(
    rating: Annotated[float, typer.Argument(help="Rating of the first side.")],
    opponent_rating: Annotated[float, typer.Argument(help="Rating of the opponent.")],
) -> None:
    """Print the expected score of RATING against OPPONENT_RATING."""
    try:
        score = calculate_expected_score(rating, opponent_rating)
    except MatchValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(f"{score:.6f}")


@app.command()
def duel(
    winner: Annotated[str, typer.Argument(help="Winner as ID:RATING.")],
    loser: Annotated[str, typer.Argument(help="Loser as ID:RATING.")],
    k_factor: KFactorOption = None,
    config_dir: ConfigDirOption = None,
    system_name: SystemNameOption = "default",
) -> None:
    """Rate a one-on-one game."""
    options = resolve_options(
        k_factor=k_factor,
        strategy=None,
        config_dir=config_dir,
        system_name=system_name,
    )
    try:
        results = calculate_duel(parse_participant(winner), parse_participant(loser), options)
    except MatchValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_results(results)


@app.command("free-for-all")
def free_for_all(
    entries: Annotated[list[str], typer.Argument(help="Participants as ID:RATING:SCORE.")],
    k_factor: KFactorOption = None,
    config_dir: ConfigDirOption = None,
    system_name: SystemNameOption = "default",
) -> None:
    """Rate a contest where every participant is compared with every other."""
    options = resolve_options(
        k_factor=k_factor,
        strategy=None,
        config_dir=config_dir,
        system_name=system_name,
    )
    try:
        results = calculate_free_for_all(
            [parse_scored_participant(entry) for entry in entries],
            options,
        )
    except MatchValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_results(results)


@app.command()
def match(
    match_file: Annotated[Path, typer.Argument(help="TOML file with [[teams]] tables.")],
    k_factor: KFactorOption = None,
    strategy: StrategyOption = None,
    config_dir: ConfigDirOption = None,
    system_name: SystemNameOption = "default",
) -> None:
    """Rate a match between two or more teams."""
    options = resolve_options(
        k_factor=k_factor,
        strategy=strategy,
        config_dir=config_dir,
        system_name=system_name,
    )
    try:
        teams = load_match_file(match_file)
        results = calculate_multi_team_match(teams, options)
    except (OSError, ValueError, TypeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="MATCH_FILE") from exc
    _echo_results(results)


if __name__ == "__main__":
    app()
