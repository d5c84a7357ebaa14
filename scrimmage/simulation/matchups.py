"""Blocking and coverage assignments for a drive."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from scrimmage.core.enums import CoverageType
from scrimmage.core.models import DefensiveUnit, OffensiveUnit, Player


@dataclass(frozen=True)
class Matchup:
    """
    Who blocks whom and who covers whom.

    ``blocking`` maps every rusher to its blocker (None when unblocked);
    ``coverage`` maps every receiver to its covering defenders (empty when
    uncovered). Built once per drive since rosters do not change mid-drive.
    """

    offense: OffensiveUnit
    defense: DefensiveUnit
    blocking: dict[UUID, Optional[UUID]] = field(default_factory=dict)
    coverage: dict[UUID, tuple[UUID, ...]] = field(default_factory=dict)
    players: dict[UUID, Player] = field(default_factory=dict)

    @property
    def coverage_type(self) -> CoverageType:
        return self.defense.coverage_type

    @property
    def quarterback(self) -> Player:
        return self.offense.quarterback

    def player(self, player_id: UUID) -> Player:
        try:
            return self.players[player_id]
        except KeyError:
            raise KeyError(f"Player {player_id} is not part of this matchup") from None

    def defenders_for(self, receiver_id: UUID) -> tuple[UUID, ...]:
        return self.coverage.get(receiver_id, ())


def default_blocking(offense: OffensiveUnit, defense: DefensiveUnit) -> dict[UUID, Optional[UUID]]:
    """Pair the lines left to right; extra rushers come free."""
    blocking: dict[UUID, Optional[UUID]] = {}
    for index, rusher in enumerate(defense.linemen):
        blocker = offense.linemen[index] if index < len(offense.linemen) else None
        blocking[rusher.id] = blocker.id if blocker else None
    return blocking


def default_coverage(offense: OffensiveUnit, defense: DefensiveUnit) -> dict[UUID, tuple[UUID, ...]]:
    """
    Defender i covers receiver i.

    Surplus defenders double the receivers in read order; receivers
    beyond the coverage group are left uncovered.
    """
    coverage: dict[UUID, list[UUID]] = {r.id: [] for r in offense.receivers}
    if not offense.receivers:
        return {}
    for index, defender in enumerate(defense.coverage):
        receiver = offense.receivers[index % len(offense.receivers)]
        coverage[receiver.id].append(defender.id)
    return {receiver_id: tuple(ids) for receiver_id, ids in coverage.items()}


def build_matchup(offense: OffensiveUnit, defense: DefensiveUnit) -> Matchup:
    """
    Combine positional defaults with the defense's explicit assignments.

    Explicit assignments replace the default for that rusher or receiver
    only. Raises KeyError if an assignment names an unknown player.
    """
    players = {p.id: p for p in offense.players + defense.players}

    blocking = default_blocking(offense, defense)
    for rusher_id, blocker_id in defense.blocking_assignments.items():
        _require(players, rusher_id)
        if blocker_id is not None:
            _require(players, blocker_id)
        blocking[rusher_id] = blocker_id

    coverage = default_coverage(offense, defense)
    for receiver_id, defender_ids in defense.coverage_assignments.items():
        _require(players, receiver_id)
        for defender_id in defender_ids:
            _require(players, defender_id)
        coverage[receiver_id] = tuple(defender_ids)

    return Matchup(
        offense=offense,
        defense=defense,
        blocking=blocking,
        coverage=coverage,
        players=players,
    )


def _require(players: dict[UUID, Player], player_id: UUID) -> None:
    if player_id not in players:
        raise KeyError(f"Assignment references unknown player {player_id}")
