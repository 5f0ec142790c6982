"""Shared protocols and enums for match calculations."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from match_elo.errors import MatchValidationError

if TYPE_CHECKING:
    from match_elo.common import Team


class CalculationStrategy(str, Enum):
    """How a team-level delta is shared between the team's members."""

    UNIFORM = "uniform"
    WEIGHTED = "weighted"

    @classmethod
    def parse(cls, value: str | CalculationStrategy) -> CalculationStrategy:
        """Accept enum members, canonical values and the older AVERAGE_TEAMS/WEIGHTED_TEAMS names."""
        if isinstance(value, CalculationStrategy):
            return value
        normalized = str(value).strip().lower()
        aliases = {
            "average_teams": cls.UNIFORM,
            "weighted_teams": cls.WEIGHTED,
        }
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise MatchValidationError(
                f"Unknown calculation strategy {value!r}; expected one of: {choices}"
            ) from None


@runtime_checkable
class DistributionPolicy(Protocol):
    """Splits one team's final delta into per-member deltas."""

    def distribute(self, team: Team, final_delta: int) -> dict[str, int]: ...


__all__ = ["CalculationStrategy", "DistributionPolicy"]
