"""Offensive and defensive units supplied by the roster system."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from scrimmage.core.enums import CoverageType, QBTrait
from scrimmage.core.errors import EmptyRosterError
from scrimmage.core.models.player import Player


@dataclass
class OffensiveUnit:
    """
    The eleven (or fewer) players on offense for a drive.

    Receivers are listed in read order; the line is listed left to right
    and is paired positionally with the defensive line.
    """

    quarterback: Optional[Player] = None
    receivers: list[Player] = field(default_factory=list)
    linemen: list[Player] = field(default_factory=list)
    trait: QBTrait = QBTrait.BALANCED

    def validate(self) -> None:
        """Raise EmptyRosterError when a required group is missing."""
        if self.quarterback is None:
            raise EmptyRosterError("quarterback")
        if not self.receivers:
            raise EmptyRosterError("receivers")

    @property
    def players(self) -> list[Player]:
        qb = [self.quarterback] if self.quarterback else []
        return qb + self.receivers + self.linemen

    def get_player(self, player_id: UUID) -> Optional[Player]:
        """Find a player on this unit by ID."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None


@dataclass
class DefensiveUnit:
    """
    The defense for a drive.

    ``blocking_assignments`` maps rusher ID -> blocker ID and
    ``coverage_assignments`` maps receiver ID -> defender IDs. When
    omitted, assignments are made positionally by the matchup builder.
    """

    linemen: list[Player] = field(default_factory=list)
    coverage: list[Player] = field(default_factory=list)
    coverage_type: CoverageType = CoverageType.MAN

    blocking_assignments: dict[UUID, UUID] = field(default_factory=dict)
    coverage_assignments: dict[UUID, list[UUID]] = field(default_factory=dict)

    @property
    def players(self) -> list[Player]:
        return self.linemen + self.coverage

    def get_player(self, player_id: UUID) -> Optional[Player]:
        """Find a player on this unit by ID."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None
