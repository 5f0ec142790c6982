"""Unit tests for team distribution policies."""

from __future__ import annotations

import pytest

from match_elo import CalculationStrategy, Participant, RatingInvariantError, Team
from match_elo.distribution import UniformDistribution, WeightedDistribution, distribution_for
from match_elo.protocol import DistributionPolicy


def _team(*ratings: float) -> Team:
    return Team.create(
        "team",
        [Participant.create(f"p{index}", rating) for index, rating in enumerate(ratings)],
        1,
    )


def test_distribution_for_strategy() -> None:
    assert isinstance(distribution_for(CalculationStrategy.UNIFORM), UniformDistribution)
    assert isinstance(distribution_for("weighted"), WeightedDistribution)
    assert isinstance(distribution_for("uniform"), DistributionPolicy)


def test_uniform_broadcasts_delta() -> None:
    assert UniformDistribution().distribute(_team(800, 1200, 1600), -9) == {
        "p0": -9,
        "p1": -9,
        "p2": -9,
    }


def test_weighted_favors_stronger_member() -> None:
    shares = WeightedDistribution().distribute(_team(700, 1150), 12)
    assert shares == {"p0": 9, "p1": 15}


def test_weighted_loss_hits_stronger_member_harder() -> None:
    shares = WeightedDistribution().distribute(_team(1300, 1000), -12)
    assert shares == {"p0": -14, "p1": -10}
    assert sum(shares.values()) == -24


def test_weighted_zero_total_rating_splits_equally() -> None:
    assert WeightedDistribution().distribute(_team(0, 0), 8) == {"p0": 8, "p1": 8}


def test_single_member_team_receives_full_delta() -> None:
    assert WeightedDistribution().distribute(_team(1500), 7) == {"p0": 7}
    assert WeightedDistribution().distribute(_team(1500), -7) == {"p0": -7}


def test_member_weight_rejects_outsiders() -> None:
    team = _team(1200, 1300)
    with pytest.raises(RatingInvariantError):
        team.member_weight(Participant.create("stranger", 1200))
