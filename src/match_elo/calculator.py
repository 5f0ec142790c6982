"""Round-robin Elo calculation over any number of teams."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from match_elo.common import RatingResult, Team, TeamDelta, validate_teams
from match_elo.config import EloOptions
from match_elo.distribution import distribution_for
from match_elo.errors import MatchValidationError, RatingInvariantError
from match_elo.protocol import CalculationStrategy
from match_elo.scoring import actual_score, calculate_expected_score, pairwise_delta, signed_round

logger = logging.getLogger("match_elo.calculator")


@dataclass(frozen=True)
class MatchConfiguration:
    """Validated, immutable input to one calculation."""

    teams: tuple[Team, ...]
    options: EloOptions = field(default_factory=EloOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "teams", tuple(self.teams))
        validate_teams(self.teams)


@dataclass(frozen=True)
class MatchOutcome:
    """Everything produced by one calculation."""

    results: tuple[RatingResult, ...]
    team_deltas: tuple[TeamDelta, ...]
    k_factor: float
    strategy: CalculationStrategy

    def rating_for(self, identifier: str) -> float:
        for result in self.results:
            if result.identifier == identifier:
                return result.rating
        raise KeyError(identifier)

    def as_dict(self) -> dict[str, float]:
        """Return ``{identifier: new rating}``."""
        return {result.identifier: result.rating for result in self.results}

    def total_delta(self) -> int:
        return sum(result.rating_delta for result in self.results)


class EloMatchCalculator:
    """Stateless Elo calculator for duels, free-for-alls and team matches.

    Every team is compared with every other team using team average ratings.
    The summed delta is rounded once per team and then shared between members
    according to the configured strategy.
    """

    def __init__(self, options: EloOptions | None = None) -> None:
        self.options = options or EloOptions()
        self._distribution = distribution_for(self.options.strategy)

    def team_delta(self, team: Team, teams: Sequence[Team]) -> TeamDelta:
        """Aggregate one team's pairwise deltas against every other team."""
        team_average = team.average_rating()
        raw_delta = 0.0
        for other_team in teams:
            if other_team is team:
                continue
            expected = calculate_expected_score(
                rating=team_average,
                opponent_rating=other_team.average_rating(),
                scale_factor=self.options.scale_factor,
            )
            raw_delta += pairwise_delta(
                self.options.k_factor,
                actual_score(team.score, other_team.score),
                expected,
            )

        return TeamDelta(
            team_id=team.identifier,
            score=team.score,
            average_rating=team_average,
            raw_delta=raw_delta,
            final_delta=signed_round(raw_delta),
        )

    def process_match(self, teams: Sequence[Team]) -> MatchOutcome:
        validate_teams(teams)

        team_deltas = tuple(self.team_delta(team, teams) for team in teams)

        member_deltas: dict[str, int] = {}
        for team, delta in zip(teams, team_deltas):
            logger.debug(
                f"Team {team.identifier}: avg={delta.average_rating:.2f} "
                f"raw_delta={delta.raw_delta:.4f} final_delta={delta.final_delta}"
            )
            member_deltas.update(self._distribution.distribute(team, delta.final_delta))

        results = self._assemble_results(teams, member_deltas)
        logger.debug(
            f"Calculated {len(results)} ratings across {len(teams)} teams "
            f"(k_factor={self.options.k_factor}, strategy={self.options.strategy.value})"
        )
        return MatchOutcome(
            results=results,
            team_deltas=team_deltas,
            k_factor=self.options.k_factor,
            strategy=self.options.strategy,
        )

    @staticmethod
    def _assemble_results(
        teams: Sequence[Team],
        member_deltas: dict[str, int],
    ) -> tuple[RatingResult, ...]:
        results: list[RatingResult] = []
        for team in teams:
            for participant in team.participants:
                if participant.identifier not in member_deltas:
                    raise RatingInvariantError(
                        f"No rating delta computed for participant {participant.identifier!r}"
                    )
                rating_delta = member_deltas[participant.identifier]
                results.append(
                    RatingResult(
                        identifier=participant.identifier,
                        pre_rating=participant.rating,
                        rating_delta=rating_delta,
                        rating=participant.rating + rating_delta,
                    )
                )

        if len(results) != len(member_deltas):
            raise RatingInvariantError(
                f"Assembled {len(results)} results for {len(member_deltas)} rated participants"
            )
        return tuple(results)


def calculate_match(configuration: MatchConfiguration) -> MatchOutcome:
    return EloMatchCalculator(configuration.options).process_match(configuration.teams)


def calculate_teams(
    teams: Sequence[Team],
    options: EloOptions | None,
    *,
    minimum: int = 2,
    maximum: int | None = None,
) -> MatchOutcome:
    """Validate team-count bounds and run the calculator."""
    if maximum is not None and len(teams) > maximum:
        raise MatchValidationError(f"Expected at most {maximum} teams, got {len(teams)}")
    validate_teams(teams, minimum=minimum)
    return EloMatchCalculator(options).process_match(teams)


__all__ = [
    "EloMatchCalculator",
    "MatchConfiguration",
    "MatchOutcome",
    "calculate_match",
    "calculate_teams",
]
