"""Stats Collector - per-participant contributions from play results."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional
from uuid import UUID

from scrimmage.core.enums import PlayOutcome
from scrimmage.core.models import DriveResult, PlayResult
from scrimmage.events.bus import EventBus
from scrimmage.events.types import PlayCompletedEvent


class PerformanceEventType(str, Enum):
    """Contribution types consumed by external economy/progression layers."""

    CATCH = "catch"
    TOUCHDOWN = "touchdown"
    TACKLE = "tackle"
    SACK = "sack"
    INTERCEPTION = "interception"
    PASS_DEFENDED = "pass_defended"
    YARDS_GAINED = "yards_gained"


@dataclass(frozen=True)
class PerformanceEvent:
    """One credited contribution; ``value`` is a count, or yards for YARDS_GAINED."""

    player_id: UUID
    event_type: PerformanceEventType
    value: int = 1

    def to_dict(self) -> dict:
        return {
            "player_id": str(self.player_id),
            "event_type": self.event_type.value,
            "value": self.value,
        }


@dataclass
class ParticipantStats:
    """Running totals for one participant."""

    player_id: UUID

    # Passing
    pass_attempts: int = 0
    completions: int = 0
    passing_yards: int = 0
    passing_touchdowns: int = 0
    interceptions_thrown: int = 0
    sacks_taken: int = 0
    sack_yards_lost: int = 0

    # Receiving / rushing
    targets: int = 0
    catches: int = 0
    receiving_yards: int = 0
    touchdowns: int = 0
    scrambles: int = 0
    scramble_yards: int = 0

    # Defense
    tackles: int = 0
    sacks: int = 0
    interceptions: int = 0
    passes_defended: int = 0

    @property
    def completion_pct(self) -> float:
        if self.pass_attempts == 0:
            return 0.0
        return self.completions / self.pass_attempts * 100

    @property
    def yards_gained(self) -> int:
        return self.receiving_yards + self.scramble_yards

    def to_dict(self) -> dict:
        data = asdict(self)
        data["player_id"] = str(self.player_id)
        return data


class StatsCollector:
    """
    Collects statistics from simulated plays.

    Feed it results directly with ``process_play``/``process_drive``, or
    hand it an EventBus and it will listen for completed plays.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._stats: dict[UUID, ParticipantStats] = {}
        self.events: list[PerformanceEvent] = []
        self.plays_processed = 0

        if event_bus is not None:
            event_bus.subscribe(PlayCompletedEvent, self._on_play_completed)

    def _on_play_completed(self, event: PlayCompletedEvent) -> None:
        self.process_play(event.result)

    def _get_or_create(self, player_id: UUID) -> ParticipantStats:
        if player_id not in self._stats:
            self._stats[player_id] = ParticipantStats(player_id=player_id)
        return self._stats[player_id]

    def get(self, player_id: UUID) -> ParticipantStats:
        """Stats for a participant (zeros if never credited)."""
        return self._stats.get(player_id) or ParticipantStats(player_id=player_id)

    def all_stats(self) -> list[ParticipantStats]:
        return list(self._stats.values())

    def process_drive(self, drive: DriveResult) -> list[PerformanceEvent]:
        events = []
        for play in drive.plays:
            events.extend(self.process_play(play))
        return events

    def process_play(self, result: PlayResult) -> list[PerformanceEvent]:
        """
        Credit every participant named on a play.

        Args:
            result: A resolved play (kicks credit nobody)

        Returns:
            PerformanceEvents generated by this play
        """
        self.plays_processed += 1
        events: list[PerformanceEvent] = []

        def credit(player_id: Optional[UUID], event_type: PerformanceEventType, value: int = 1):
            if player_id is not None:
                events.append(PerformanceEvent(player_id, event_type, value))

        outcome = result.outcome
        is_scramble_td = outcome == PlayOutcome.TOUCHDOWN and result.rusher_id is not None

        if outcome == PlayOutcome.SACK:
            if result.passer_id:
                passer = self._get_or_create(result.passer_id)
                passer.sacks_taken += 1
                passer.sack_yards_lost += abs(result.yards_gained)
            if result.sacker_id:
                self._get_or_create(result.sacker_id).sacks += 1
                credit(result.sacker_id, PerformanceEventType.SACK)

        elif outcome == PlayOutcome.SCRAMBLE or is_scramble_td:
            runner = self._get_or_create(result.rusher_id)
            runner.scrambles += 1
            runner.scramble_yards += result.yards_gained
            credit(result.rusher_id, PerformanceEventType.YARDS_GAINED, result.yards_gained)
            if is_scramble_td:
                runner.touchdowns += 1
                credit(result.rusher_id, PerformanceEventType.TOUCHDOWN)

        elif outcome.is_pass_attempt:
            self._process_pass(result, credit)

        self.events.extend(events)
        return events

    def _process_pass(self, result: PlayResult, credit) -> None:
        passer = self._get_or_create(result.passer_id) if result.passer_id else None
        receiver = self._get_or_create(result.receiver_id) if result.receiver_id else None

        if passer:
            passer.pass_attempts += 1
        if receiver:
            receiver.targets += 1

        if result.is_completion:
            if passer:
                passer.completions += 1
                passer.passing_yards += result.yards_gained
            if receiver:
                receiver.catches += 1
                receiver.receiving_yards += result.yards_gained
            credit(result.receiver_id, PerformanceEventType.CATCH)
            credit(result.receiver_id, PerformanceEventType.YARDS_GAINED, result.yards_gained)

            if result.is_touchdown:
                if passer:
                    passer.passing_touchdowns += 1
                if receiver:
                    receiver.touchdowns += 1
                credit(result.receiver_id, PerformanceEventType.TOUCHDOWN)
            elif result.tackler_id:
                self._get_or_create(result.tackler_id).tackles += 1
                credit(result.tackler_id, PerformanceEventType.TACKLE)

        elif result.outcome == PlayOutcome.INTERCEPTION:
            if passer:
                passer.interceptions_thrown += 1
            self._get_or_create(result.interceptor_id).interceptions += 1
            credit(result.interceptor_id, PerformanceEventType.INTERCEPTION)

        elif result.outcome == PlayOutcome.INCOMPLETE and result.defender_id:
            self._get_or_create(result.defender_id).passes_defended += 1
            credit(result.defender_id, PerformanceEventType.PASS_DEFENDED)

    def get_summary(self) -> dict:
        """Totals keyed by player ID string."""
        return {
            "plays": self.plays_processed,
            "players": {str(s.player_id): s.to_dict() for s in self._stats.values()},
            "events": [e.to_dict() for e in self.events],
        }
