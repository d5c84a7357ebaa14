"""Immutable per-phase play state.

Every phase of the round loop takes a PlayState and returns a new one,
so a play can be replayed snapshot by snapshot and each phase can be
tested on its own.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional
from uuid import UUID

from scrimmage.config import RouteTemplate
from scrimmage.core.enums import QBTrait

MAX_PRESSURE = 100.0


class PlayPhase(str, Enum):
    """Where the round loop is."""

    AWAITING_LINE_CLASH = "awaiting_line_clash"
    AWAITING_SEPARATION = "awaiting_separation"
    AWAITING_CATCH_CALC = "awaiting_catch_calc"
    AWAITING_QB_DECISION = "awaiting_qb_decision"
    DESPERATION = "desperation"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class LinemanState:
    """One blocker or rusher."""

    player_id: UUID
    engaged_with: Optional[UUID] = None
    knocked_down: bool = False

    @property
    def engaged(self) -> bool:
        return self.engaged_with is not None


@dataclass(frozen=True)
class ReceiverState:
    """A receiver's route progress and how open the receiver is this round."""

    player_id: UUID
    route: RouteTemplate
    covered_by: tuple[UUID, ...] = ()
    current_depth: float = 0.0
    crossing: bool = False
    separation_margin: float = 0.0
    primary_defender_id: Optional[UUID] = None
    catch_probability: float = 0.0  # Catch threshold, [5, 95]
    roll_mean: float = 0.0
    completion_pct: float = 0.0

    @property
    def is_covered(self) -> bool:
        return bool(self.covered_by)


@dataclass(frozen=True)
class QuarterbackState:
    player_id: UUID
    trait: QBTrait = QBTrait.BALANCED
    has_thrown: bool = False
    target_id: Optional[UUID] = None


@dataclass(frozen=True)
class PlayState:
    """Snapshot of a play between phases."""

    quarterback: QuarterbackState
    receivers: tuple[ReceiverState, ...] = ()
    blockers: tuple[LinemanState, ...] = ()
    rushers: tuple[LinemanState, ...] = ()
    round: int = 0
    phase: PlayPhase = PlayPhase.AWAITING_LINE_CLASH
    total_pressure: float = 0.0
    sacked: bool = False

    def advance(self, **changes) -> "PlayState":
        """New snapshot with some fields replaced."""
        return replace(self, **changes)

    def add_pressure(self, amount: float) -> "PlayState":
        """Accumulate pressure; it never drops within a play and caps at 100."""
        total = max(self.total_pressure, min(MAX_PRESSURE, self.total_pressure + max(0.0, amount)))
        return replace(self, total_pressure=total)

    def receiver(self, player_id: UUID) -> ReceiverState:
        for receiver in self.receivers:
            if receiver.player_id == player_id:
                return receiver
        raise KeyError(f"No receiver {player_id} in play")

    def blocker(self, player_id: UUID) -> Optional[LinemanState]:
        for blocker in self.blockers:
            if blocker.player_id == player_id:
                return blocker
        return None

    def with_receivers(self, receivers: list[ReceiverState]) -> "PlayState":
        return replace(self, receivers=tuple(receivers))

    def best_receiver(self) -> Optional[ReceiverState]:
        """Receiver with the highest catch threshold (first wins ties)."""
        best = None
        for receiver in self.receivers:
            if best is None or receiver.catch_probability > best.catch_probability:
                best = receiver
        return best

    def to_dict(self) -> dict:
        """Convert to dictionary for trace output."""
        return {
            "round": self.round,
            "phase": self.phase.value,
            "total_pressure": round(self.total_pressure, 2),
            "sacked": self.sacked,
            "quarterback": {
                "player_id": str(self.quarterback.player_id),
                "trait": self.quarterback.trait.value,
                "has_thrown": self.quarterback.has_thrown,
            },
            "receivers": [
                {
                    "player_id": str(r.player_id),
                    "route": r.route.name,
                    "current_depth": r.current_depth,
                    "separation_margin": round(r.separation_margin, 2),
                    "catch_probability": round(r.catch_probability, 2),
                    "roll_mean": round(r.roll_mean, 2),
                }
                for r in self.receivers
            ],
            "blockers": [
                {"player_id": str(b.player_id), "knocked_down": b.knocked_down}
                for b in self.blockers
            ],
            "rushers": [
                {
                    "player_id": str(r.player_id),
                    "engaged_with": str(r.engaged_with) if r.engaged_with else None,
                    "knocked_down": r.knocked_down,
                }
                for r in self.rushers
            ],
        }
