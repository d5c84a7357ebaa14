"""Yards after catch."""

import logging
import random
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from scrimmage.config import DEFAULT_CONFIG, EngineConfig
from scrimmage.core.models import Player
from scrimmage.simulation.matchups import Matchup
from scrimmage.simulation.resolvers.clash import clamp, weighted_roll
from scrimmage.simulation.state import ReceiverState

logger = logging.getLogger(__name__)

# A defender this close (separation below) gets a shot at the catch point
CATCH_POINT_RANGE = 10.0
CATCH_POINT_BONUS = 5.0

# tackle roll - evasion roll at or above this brings the carrier down
TACKLE_MARGIN = -12.0

MAX_SEGMENTS = 3
SEGMENT_BASE = 2.0
SEGMENT_SPAN = 10.0
MIN_SEGMENT_YARDS = 2.0
MAX_SEGMENT_YARDS = 12.0
TACKLED_SEGMENT_SHARE = 0.5

SAFETY_BONUS_BASE = 10.0
SAFETY_BONUS_STEP = 5.0


def tackle_succeeds(margin: float) -> bool:
    """A miss only when the carrier beats the tackler by more than 12."""
    return margin >= TACKLE_MARGIN


def segment_yards(roll: float) -> float:
    return clamp(SEGMENT_BASE + roll / 100 * SEGMENT_SPAN, MIN_SEGMENT_YARDS, MAX_SEGMENT_YARDS)


def safety_bonus(attempt: int) -> float:
    return SAFETY_BONUS_BASE + attempt * SAFETY_BONUS_STEP


@dataclass(frozen=True)
class YACSegment:
    attempt: int
    yards: float
    tackler_id: Optional[UUID] = None
    tackled: bool = False


@dataclass(frozen=True)
class YACResult:
    """Where a completed pass ended up."""

    yards_gained: int
    air_yards: int
    touchdown: bool = False
    tackler_id: Optional[UUID] = None
    catch_point_tackle: bool = False
    segments: tuple[YACSegment, ...] = ()

    @property
    def yards_after_catch(self) -> int:
        return self.yards_gained - self.air_yards


class YACResolver:
    """
    Runs the ball carrier through up to three tackle attempts.

    Pursuers come in order: the primary defender, other covering
    defenders, then the rest of the coverage by pursuit. Safeties get an
    escalating bonus. Once pursuers run out the field is open and every
    remaining segment is gained in full.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def tackle_roll(self, tackler: Player, rng: random.Random, bonus: float = 0.0) -> float:
        return bonus + weighted_roll(
            tackler.attributes, self.config.weights.tackle, rng, self.config.variance_factor
        )

    def evasion_roll(self, carrier: Player, rng: random.Random) -> float:
        return weighted_roll(
            carrier.attributes, self.config.weights.evasion, rng, self.config.variance_factor
        )

    def pursuers(self, receiver: ReceiverState, matchup: Matchup) -> list[Player]:
        """Defenders in the order they get to the ball carrier."""
        ordered = []
        if receiver.primary_defender_id is not None:
            ordered.append(receiver.primary_defender_id)
        ordered.extend(d for d in receiver.covered_by if d not in ordered)

        rest = [p for p in matchup.defense.coverage if p.id not in ordered]
        rest.sort(key=lambda p: -p.get_attribute("pursuit"))
        return [matchup.player(d) for d in ordered] + rest

    def resolve(
        self,
        receiver_state: ReceiverState,
        matchup: Matchup,
        yards_from_goal: int,
        rng: random.Random,
    ) -> YACResult:
        """
        Resolve the run after a catch.

        Args:
            receiver_state: Receiver at the catch point
            matchup: Matchup for pursuer lookup
            yards_from_goal: Distance to the end zone from the line of scrimmage
            rng: Shared random stream

        Returns:
            YACResult; yards are capped at the goal line on a touchdown
        """
        carrier = matchup.player(receiver_state.player_id)
        depth = receiver_state.current_depth
        air_yards = min(int(round(depth)), yards_from_goal)

        if (
            receiver_state.primary_defender_id is not None
            and receiver_state.separation_margin < CATCH_POINT_RANGE
        ):
            defender = matchup.player(receiver_state.primary_defender_id)
            margin = self.tackle_roll(defender, rng, CATCH_POINT_BONUS) - self.evasion_roll(carrier, rng)
            if tackle_succeeds(margin):
                logger.debug(f"Tackled at the catch point by {defender.display_name}")
                return self._finish(depth, air_yards, yards_from_goal, defender.id, True, ())

        pursuers = self.pursuers(receiver_state, matchup)
        total = depth
        tackler_id = None
        segments = []

        for attempt in range(MAX_SEGMENTS):
            burst = weighted_roll(
                carrier.attributes, self.config.weights.yac_burst, rng, self.config.variance_factor
            )
            yards = segment_yards(burst)

            if attempt >= len(pursuers):
                segments.append(YACSegment(attempt, yards))
                total += yards
                continue

            pursuer = pursuers[attempt]
            bonus = safety_bonus(attempt) if pursuer.position.is_safety else 0.0
            margin = self.tackle_roll(pursuer, rng, bonus) - self.evasion_roll(carrier, rng)
            if tackle_succeeds(margin):
                gained = yards * TACKLED_SEGMENT_SHARE
                segments.append(YACSegment(attempt, gained, pursuer.id, tackled=True))
                total += gained
                tackler_id = pursuer.id
                break
            segments.append(YACSegment(attempt, yards, pursuer.id))
            total += yards

        return self._finish(total, air_yards, yards_from_goal, tackler_id, False, tuple(segments))

    @staticmethod
    def _finish(
        total: float,
        air_yards: int,
        yards_from_goal: int,
        tackler_id: Optional[UUID],
        catch_point: bool,
        segments: tuple[YACSegment, ...],
    ) -> YACResult:
        gained = int(round(total))
        if gained >= yards_from_goal:
            return YACResult(
                yards_gained=yards_from_goal,
                air_yards=air_yards,
                touchdown=True,
                catch_point_tackle=catch_point,
                segments=segments,
            )
        return YACResult(
            yards_gained=gained,
            air_yards=min(air_yards, gained),
            tackler_id=tackler_id,
            catch_point_tackle=catch_point,
            segments=segments,
        )
