"""Policies that share a team's final delta between its members."""

from __future__ import annotations

from match_elo.common import Team
from match_elo.protocol import CalculationStrategy, DistributionPolicy
from match_elo.scoring import round_half_up


class UniformDistribution:
    """Every member receives the team delta unchanged."""

    def distribute(self, team: Team, final_delta: int) -> dict[str, int]:
        return {participant.identifier: final_delta for participant in team.participants}


class WeightedDistribution:
    """Members receive the team delta scaled by their share of the team rating.

    A member holding exactly the average rating receives roughly the team delta;
    stronger members absorb more of both gains and losses.
    """

    def distribute(self, team: Team, final_delta: int) -> dict[str, int]:
        member_count = team.member_count
        return {
            participant.identifier: round_half_up(
                final_delta * member_count * team.member_weight(participant)
            )
            for participant in team.participants
        }


_POLICIES: dict[CalculationStrategy, DistributionPolicy] = {
    CalculationStrategy.UNIFORM: UniformDistribution(),
    CalculationStrategy.WEIGHTED: WeightedDistribution(),
}


def distribution_for(strategy: CalculationStrategy | str) -> DistributionPolicy:
    return _POLICIES[CalculationStrategy.parse(strategy)]


__all__ = ["UniformDistribution", "WeightedDistribution", "distribution_for"]
