"""Shared types for match calculations."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import isfinite
from numbers import Real
from typing import Union

from match_elo.errors import MatchValidationError, RatingInvariantError
from match_elo.scoring import (
    DEFAULT_SCALE_FACTOR,
    adjusted_weight,
    calculate_expected_score,
    round_half_up,
)


def require_identifier(identifier: object, *, label: str) -> None:
    if not isinstance(identifier, str) or not identifier.strip():
        raise MatchValidationError(f"{label} identifier must be a non-empty string, got {identifier!r}")


def require_finite(value: object, *, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, Real) or not isfinite(value):
        raise MatchValidationError(f"{label} must be a finite number, got {value!r}")


@dataclass(frozen=True)
class Participant:
    """One rated competitor."""

    identifier: str
    rating: float

    def __post_init__(self) -> None:
        require_identifier(self.identifier, label="Participant")
        require_finite(self.rating, label=f"Rating of participant {self.identifier!r}")

    @classmethod
    def create(cls, identifier: str, rating: float) -> Participant:
        """Build a participant with a trimmed identifier and an integer rating."""
        require_identifier(identifier, label="Participant")
        require_finite(rating, label=f"Rating of participant {identifier!r}")
        return cls(identifier=identifier.strip(), rating=float(round_half_up(rating)))

    def expected_score_against(
        self,
        opponent: Opponent,
        *,
        scale_factor: float = DEFAULT_SCALE_FACTOR,
    ) -> float:
        return calculate_expected_score(
            rating=self.rating,
            opponent_rating=resolve_rating(opponent),
            scale_factor=scale_factor,
        )


@dataclass(frozen=True)
class Team:
    """Ordered group of participants sharing one score."""

    identifier: str
    participants: tuple[Participant, ...]
    score: float

    def __post_init__(self) -> None:
        require_identifier(self.identifier, label="Team")
        require_finite(self.score, label=f"Score of team {self.identifier!r}")

    @classmethod
    def create(
        cls,
        identifier: str,
        participants: Iterable[Participant],
        score: float,
    ) -> Team:
        require_identifier(identifier, label="Team")
        return cls(identifier=identifier.strip(), participants=tuple(participants), score=score)

    @property
    def member_count(self) -> int:
        return len(self.participants)

    def total_rating(self) -> float:
        return sum(participant.rating for participant in self.participants)

    def average_rating(self) -> float:
        if not self.participants:
            raise MatchValidationError(f"Team {self.identifier!r} has no participants")
        return self.total_rating() / float(len(self.participants))

    def member_weight(self, participant: Participant) -> float:
        """Share of the team rating held by one member (see ``adjusted_weight``)."""
        if participant not in self.participants:
            raise RatingInvariantError(
                f"Participant {participant.identifier!r} is not a member of team {self.identifier!r}"
            )
        return adjusted_weight(
            rating=participant.rating,
            total_rating=self.total_rating(),
            member_count=self.member_count,
        )

    def expected_score_against(
        self,
        opponent: Opponent,
        *,
        scale_factor: float = DEFAULT_SCALE_FACTOR,
    ) -> float:
        return calculate_expected_score(
            rating=self.average_rating(),
            opponent_rating=resolve_rating(opponent),
            scale_factor=scale_factor,
        )


Opponent = Union[float, int, Participant, Team]


def resolve_rating(entity: Opponent) -> float:
    """Reduce a raw rating, participant or team to the rating used in expected-score math."""
    if isinstance(entity, Participant):
        return entity.rating
    if isinstance(entity, Team):
        return entity.average_rating()
    if isinstance(entity, Real) and not isinstance(entity, bool):
        require_finite(entity, label="Rating")
        return float(entity)
    raise RatingInvariantError(
        f"Cannot resolve a rating from {type(entity).__name__}; "
        "expected a number, Participant or Team"
    )


def validate_teams(teams: Sequence[Team], *, minimum: int = 2) -> None:
    """Check the structural preconditions shared by every match shape."""
    if len(teams) < minimum:
        raise MatchValidationError(f"A match needs at least {minimum} teams, got {len(teams)}")

    team_ids: set[str] = set()
    participant_ids: set[str] = set()
    for team in teams:
        if team.identifier in team_ids:
            raise MatchValidationError(f"Team with identifier {team.identifier!r} already exists")
        team_ids.add(team.identifier)

        if not team.participants:
            raise MatchValidationError(f"Team {team.identifier!r} has no participants")

        for participant in team.participants:
            if participant.identifier in participant_ids:
                raise MatchValidationError(
                    f"Participant with identifier {participant.identifier!r} already exists"
                )
            participant_ids.add(participant.identifier)


@dataclass(frozen=True)
class RatingResult:
    """New rating for one participant after a match."""

    identifier: str
    pre_rating: float
    rating_delta: int
    rating: float


@dataclass(frozen=True)
class TeamDelta:
    """Per-team aggregation diagnostics."""

    team_id: str
    score: float
    average_rating: float
    raw_delta: float
    final_delta: int


__all__ = [
    "Opponent",
    "Participant",
    "RatingResult",
    "Team",
    "TeamDelta",
    "require_finite",
    "require_identifier",
    "resolve_rating",
    "validate_teams",
]
