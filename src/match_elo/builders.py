"""Two-phase match builders: accumulate participants, then build an immutable configuration.

Builders are owned by a single caller while they are being filled in; the
``MatchConfiguration`` they produce is frozen and safe to share.
"""

from __future__ import annotations

from match_elo.calculator import MatchConfiguration, MatchOutcome, calculate_match
from match_elo.common import Participant, Team, require_identifier
from match_elo.config import EloOptions
from match_elo.errors import MatchValidationError


class _ParticipantRegistry:
    def __init__(self) -> None:
        self._identifiers: set[str] = set()

    def claim(self, participant: Participant) -> None:
        if participant.identifier in self._identifiers:
            raise MatchValidationError(
                f"Participant with identifier {participant.identifier!r} already exists"
            )
        self._identifiers.add(participant.identifier)

    def __len__(self) -> int:
        return len(self._identifiers)


class Duel:
    """Exactly two participants, exactly one winner."""

    def __init__(self, options: EloOptions | None = None) -> None:
        self.options = options or EloOptions()
        self._registry = _ParticipantRegistry()
        self._entries: list[tuple[Participant, bool]] = []

    def add_player(self, player: Participant, won: bool) -> Duel:
        if len(self._entries) >= 2:
            raise MatchValidationError("A duel already has two participants")
        self._registry.claim(player)
        self._entries.append((player, won))
        return self

    def build(self) -> MatchConfiguration:
        if len(self._entries) != 2:
            raise MatchValidationError(f"A duel needs exactly 2 participants, got {len(self._entries)}")
        winners = sum(1 for _, won in self._entries if won)
        if winners != 1:
            raise MatchValidationError(f"A duel needs exactly one winner, got {winners}")

        teams = tuple(
            Team(identifier=player.identifier, participants=(player,), score=1.0 if won else 0.0)
            for player, won in self._entries
        )
        return MatchConfiguration(teams=teams, options=self.options)

    def calculate(self) -> MatchOutcome:
        return calculate_match(self.build())


class FreeForAll:
    """Two or more participants, each with its own score (higher is better)."""

    def __init__(self, options: EloOptions | None = None) -> None:
        self.options = options or EloOptions()
        self._registry = _ParticipantRegistry()
        self._entries: list[tuple[Participant, float]] = []

    def add_player(self, player: Participant, score: float) -> FreeForAll:
        self._registry.claim(player)
        self._entries.append((player, score))
        return self

    def build(self) -> MatchConfiguration:
        if len(self._entries) < 2:
            raise MatchValidationError(
                f"A free-for-all needs at least 2 participants, got {len(self._entries)}"
            )
        teams = tuple(
            Team(identifier=player.identifier, participants=(player,), score=score)
            for player, score in self._entries
        )
        return MatchConfiguration(teams=teams, options=self.options)

    def calculate(self) -> MatchOutcome:
        return calculate_match(self.build())


class TeamBuilder:
    """Members of one team inside a ``TeamMatch``."""

    def __init__(self, identifier: str, score: float, registry: _ParticipantRegistry) -> None:
        self.identifier = identifier
        self.score = score
        self._registry = registry
        self._players: list[Participant] = []

    def add_player(self, player: Participant) -> TeamBuilder:
        self._registry.claim(player)
        self._players.append(player)
        return self

    def build(self) -> Team:
        return Team.create(self.identifier, self._players, self.score)


class TeamMatch:
    """Two or more teams, each carrying one score."""

    def __init__(self, options: EloOptions | None = None) -> None:
        self.options = options or EloOptions()
        self._registry = _ParticipantRegistry()
        self._teams: list[TeamBuilder] = []

    def add_team(self, identifier: str, score: float) -> TeamBuilder:
        require_identifier(identifier, label="Team")
        identifier = identifier.strip()
        if any(team.identifier == identifier for team in self._teams):
            raise MatchValidationError(f"Team with identifier {identifier!r} already exists")
        team = TeamBuilder(identifier, score, self._registry)
        self._teams.append(team)
        return team

    def build(self) -> MatchConfiguration:
        return MatchConfiguration(
            teams=tuple(team.build() for team in self._teams),
            options=self.options,
        )

    def calculate(self) -> MatchOutcome:
        return calculate_match(self.build())


__all__ = ["Duel", "FreeForAll", "TeamBuilder", "TeamMatch"]
