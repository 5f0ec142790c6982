"""Functional entry points for each match shape."""

from __future__ import annotations

from collections.abc import Sequence

from match_elo.builders import Duel, FreeForAll
from match_elo.calculator import calculate_teams
from match_elo.common import Opponent, Participant, RatingResult, Team, resolve_rating
from match_elo.config import EloOptions
from match_elo.scoring import DEFAULT_SCALE_FACTOR
from match_elo.scoring import calculate_expected_score as _expected_score


def calculate_duel(
    winner: Participant,
    loser: Participant,
    options: EloOptions | None = None,
) -> list[RatingResult]:
    outcome = Duel(options).add_player(winner, True).add_player(loser, False).calculate()
    return list(outcome.results)


def calculate_free_for_all(
    participants_with_scores: Sequence[tuple[Participant, float]],
    options: EloOptions | None = None,
) -> list[RatingResult]:
    """Rate two or more individuals; each score is compared with every other score."""
    match = FreeForAll(options)
    for participant, score in participants_with_scores:
        match.add_player(participant, score)
    return list(match.calculate().results)


def calculate_team_match(
    team_a: Team,
    team_b: Team,
    options: EloOptions | None = None,
) -> list[RatingResult]:
    return list(calculate_teams((team_a, team_b), options, minimum=2, maximum=2).results)


def calculate_multi_team_match(
    teams: Sequence[Team],
    options: EloOptions | None = None,
) -> list[RatingResult]:
    return list(calculate_teams(tuple(teams), options, minimum=2).results)


def calculate_expected_score(
    entity: Opponent,
    opponent: Opponent,
    *,
    scale_factor: float = DEFAULT_SCALE_FACTOR,
) -> float:
    """Expected score of ``entity`` against ``opponent``.

    Either side may be a raw rating, a ``Participant`` or a ``Team`` (which
    contributes its average rating).
    """
    return _expected_score(
        rating=resolve_rating(entity),
        opponent_rating=resolve_rating(opponent),
        scale_factor=scale_factor,
    )


__all__ = [
    "calculate_duel",
    "calculate_expected_score",
    "calculate_free_for_all",
    "calculate_multi_team_match",
    "calculate_team_match",
]
