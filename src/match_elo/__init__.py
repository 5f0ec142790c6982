"""Elo rating updates for duels, free-for-alls and team matches."""

from match_elo.api import (
    calculate_duel,
    calculate_expected_score,
    calculate_free_for_all,
    calculate_multi_team_match,
    calculate_team_match,
)
from match_elo.builders import Duel, FreeForAll, TeamBuilder, TeamMatch
from match_elo.calculator import EloMatchCalculator, MatchConfiguration, MatchOutcome
from match_elo.common import Participant, RatingResult, Team, TeamDelta
from match_elo.config import EloOptions, EloSystemConfig, load_elo_system_configs
from match_elo.errors import MatchValidationError, RatingInvariantError
from match_elo.protocol import CalculationStrategy

__all__ = [
    "CalculationStrategy",
    "Duel",
    "EloMatchCalculator",
    "EloOptions",
    "EloSystemConfig",
    "FreeForAll",
    "MatchConfiguration",
    "MatchOutcome",
    "MatchValidationError",
    "Participant",
    "RatingInvariantError",
    "RatingResult",
    "Team",
    "TeamBuilder",
    "TeamDelta",
    "TeamMatch",
    "calculate_duel",
    "calculate_expected_score",
    "calculate_free_for_all",
    "calculate_multi_team_match",
    "calculate_team_match",
    "load_elo_system_configs",
]
