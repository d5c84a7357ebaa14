"""Drive simulation engine."""

import logging
import random
from typing import Optional
from uuid import UUID, uuid4

from scrimmage.config import DEFAULT_CONFIG, EngineConfig
from scrimmage.core.enums import DriveOutcome, PlayOutcome
from scrimmage.core.models import (
    DefensiveUnit,
    DriveResult,
    FieldPosition,
    OffensiveUnit,
    PlayResult,
    advance_field_position,
)
from scrimmage.events.bus import EventBus
from scrimmage.events.types import (
    DriveCompletedEvent,
    DriveStartedEvent,
    PlayCompletedEvent,
    SackEvent,
    ScoringEvent,
    TurnoverEvent,
)
from scrimmage.simulation.matchups import build_matchup
from scrimmage.simulation.resolvers.base import DriveResolver
from scrimmage.simulation.resolvers.clash import chance
from scrimmage.simulation.resolvers.pass_play import PassPlayResolver

logger = logging.getLogger(__name__)

FIELD_GOAL_POINTS = 3

# Kick distance = spot + end zone + hold
FIELD_GOAL_SNAP_DISTANCE = 17
FIELD_GOAL_BASE_PROBABILITY = 0.95
FIELD_GOAL_DECAY_PER_YARD = 0.01


def field_goal_probability(yards_from_goal: int) -> float:
    """Make probability for a kick from this spot."""
    p = FIELD_GOAL_BASE_PROBABILITY - (yards_from_goal + FIELD_GOAL_SNAP_DISTANCE) * FIELD_GOAL_DECAY_PER_YARD
    return max(0.0, min(1.0, p))


class SimulationEngine(DriveResolver):
    """
    Runs possessions play by play.

    Each play gets fresh routes and a fresh PlayState; only the field
    position carries over. The drive ends on a touchdown, an
    interception, a fourth-down kick, or the play cap (a punt).
    Emits events for logging and statistics integration.
    """

    def __init__(
        self,
        config: EngineConfig = DEFAULT_CONFIG,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Initialize simulation engine.

        Args:
            config: Engine configuration
            event_bus: Event bus for notifications (creates new if None)
        """
        self.config = config
        self.event_bus = event_bus or EventBus()
        self.play_resolver = PassPlayResolver(config)

    def simulate_drive(
        self,
        offense: OffensiveUnit,
        defense: DefensiveUnit,
        start: Optional[FieldPosition] = None,
        seed: Optional[int] = None,
    ) -> DriveResult:
        """Convenience wrapper that owns its random stream."""
        return self.resolve_drive(offense, defense, start or FieldPosition(), random.Random(seed))

    def resolve_drive(
        self,
        offense: OffensiveUnit,
        defense: DefensiveUnit,
        start: FieldPosition,
        rng: random.Random,
    ) -> DriveResult:
        """
        Simulate one possession.

        Args:
            offense: Offensive unit; must have a quarterback and receivers
            defense: Defensive unit
            start: Starting field position
            rng: Random stream, the only source of randomness used

        Returns:
            DriveResult with at least one play

        Raises:
            EmptyRosterError: The offense is missing a required group
        """
        offense.validate()
        matchup = build_matchup(offense, defense)
        drive_id = uuid4()
        self.event_bus.emit(
            DriveStartedEvent(
                drive_id=drive_id,
                down=start.down,
                yards_to_go=start.yards_to_go,
                yards_from_goal=start.yards_from_goal,
                offense_qb_id=offense.quarterback.id,
            )
        )
        logger.info(f"Drive starts {start.display}")

        position = start
        plays: list[PlayResult] = []

        while True:
            if len(plays) >= self.config.max_drive_plays:
                logger.warning(f"Drive hit the {self.config.max_drive_plays}-play cap; punting")
                outcome = DriveOutcome.PUNT
                break

            if position.is_kicking_down:
                kick = self._kick(position, rng)
                plays.append(kick)
                self._emit_play(drive_id, position, kick, len(plays))
                if kick.outcome == PlayOutcome.FIELD_GOAL_GOOD:
                    outcome = DriveOutcome.FIELD_GOAL
                    self._emit_scoring(drive_id, position, kick, "FG", None)
                elif kick.outcome == PlayOutcome.FIELD_GOAL_MISSED:
                    outcome = DriveOutcome.MISSED_FG
                else:
                    outcome = DriveOutcome.PUNT
                break

            routes = self.play_resolver.route_selector.select(offense.receivers, position, rng)
            result = self.play_resolver.run(matchup, position, routes, rng).result
            plays.append(result)
            self._emit_play(drive_id, position, result, len(plays))

            if result.is_sack:
                self._emit_sack(drive_id, position, result)

            if result.is_touchdown:
                scorer = result.receiver_id or result.rusher_id
                self._emit_scoring(drive_id, position, result, "TD", scorer)
                position = advance_field_position(position, result.yards_gained)
                outcome = DriveOutcome.TOUCHDOWN
                break

            if result.is_turnover:
                self._emit_turnover(drive_id, position, result)
                outcome = DriveOutcome.TURNOVER
                break

            position = advance_field_position(position, result.yards_gained)

        drive = DriveResult(outcome=outcome, plays=tuple(plays), start=start, end=position)
        logger.info(f"Drive over: {drive.display} ({drive.points} points)")
        self.event_bus.emit(
            DriveCompletedEvent(
                drive_id=drive_id,
                down=position.down,
                yards_to_go=position.yards_to_go,
                yards_from_goal=position.yards_from_goal,
                result=drive,
                end=position,
            )
        )
        return drive

    def _kick(self, position: FieldPosition, rng: random.Random) -> PlayResult:
        """Fourth-down decision: field goal in range, otherwise punt."""
        if not position.in_field_goal_range:
            return PlayResult(outcome=PlayOutcome.PUNT, description="Punt")

        distance = position.yards_from_goal + FIELD_GOAL_SNAP_DISTANCE
        if chance(rng, field_goal_probability(position.yards_from_goal)):
            return PlayResult(
                outcome=PlayOutcome.FIELD_GOAL_GOOD,
                points_scored=FIELD_GOAL_POINTS,
                description=f"{distance}-yard field goal is GOOD",
            )
        return PlayResult(
            outcome=PlayOutcome.FIELD_GOAL_MISSED,
            description=f"{distance}-yard field goal is NO GOOD",
        )

    def _emit_play(
        self, drive_id: UUID, position: FieldPosition, result: PlayResult, play_number: int
    ) -> None:
        """Emit play completed event."""
        self.event_bus.emit(
            PlayCompletedEvent(
                drive_id=drive_id,
                down=position.down,
                yards_to_go=position.yards_to_go,
                yards_from_goal=position.yards_from_goal,
                result=result,
                play_number=play_number,
                field_position=position.display,
            )
        )

    def _emit_sack(self, drive_id: UUID, position: FieldPosition, result: PlayResult) -> None:
        self.event_bus.emit(
            SackEvent(
                drive_id=drive_id,
                down=position.down,
                yards_to_go=position.yards_to_go,
                yards_from_goal=position.yards_from_goal,
                quarterback_id=result.passer_id,
                sacker_id=result.sacker_id,
                yards_lost=-result.yards_gained,
            )
        )

    def _emit_scoring(
        self,
        drive_id: UUID,
        position: FieldPosition,
        result: PlayResult,
        scoring_type: str,
        scorer_id: Optional[UUID],
    ) -> None:
        """Emit scoring event."""
        self.event_bus.emit(
            ScoringEvent(
                drive_id=drive_id,
                down=position.down,
                yards_to_go=position.yards_to_go,
                yards_from_goal=position.yards_from_goal,
                points=result.points_scored,
                scoring_type=scoring_type,
                scorer_id=scorer_id,
                description=result.description,
            )
        )

    def _emit_turnover(self, drive_id: UUID, position: FieldPosition, result: PlayResult) -> None:
        """Emit turnover event."""
        self.event_bus.emit(
            TurnoverEvent(
                drive_id=drive_id,
                down=position.down,
                yards_to_go=position.yards_to_go,
                yards_from_goal=position.yards_from_goal,
                player_who_lost_id=result.passer_id,
                player_who_gained_id=result.interceptor_id,
            )
        )
