"""Separation clash: receivers against their coverage."""

import logging
import random
from dataclasses import replace
from typing import Mapping, Optional

from scrimmage.config import DEFAULT_CONFIG, EngineConfig, RouteStep
from scrimmage.core.enums import CoverageType
from scrimmage.core.models import Player
from scrimmage.simulation.matchups import Matchup
from scrimmage.simulation.resolvers.clash import weighted_roll
from scrimmage.simulation.state import PlayPhase, PlayState, ReceiverState

logger = logging.getLogger(__name__)

# Margin given to a receiver nobody covers
WIDE_OPEN_MARGIN = 30.0

DOUBLE_COVERAGE_BONUS = 10.0

CROSSING_AGILITY_WEIGHT = 0.3
CROSSING_ROUTE_WEIGHT = 0.2
CROSSING_SCALE = 0.5
BREAK_ROUTE_WEIGHT = 0.3
CROSSING_PENALTY_RATE = 0.15


def crossing_bonus(receiver: Player) -> float:
    """Receiver bonus for a round spent moving laterally."""
    return (
        receiver.get_attribute("agility") * CROSSING_AGILITY_WEIGHT
        + receiver.get_attribute("route_running") * CROSSING_ROUTE_WEIGHT
    ) * CROSSING_SCALE


def break_bonus(receiver: Player) -> float:
    return receiver.get_attribute("route_running") * BREAK_ROUTE_WEIGHT


def crossing_penalty(defender: Player) -> float:
    """Defender penalty for trailing a crossing route."""
    return (100 - defender.get_attribute("agility")) * CROSSING_PENALTY_RATE


class SeparationResolver:
    """
    Resolves each receiver's separation from coverage for one round.

    The margin is the receiver's roll minus the best covering defender's
    roll. More than one defender on a receiver adds
    ``DOUBLE_COVERAGE_BONUS`` to that best roll.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def coverage_weights(self, coverage_type: CoverageType) -> Mapping[str, float]:
        if coverage_type == CoverageType.ZONE:
            return self.config.weights.zone_coverage
        return self.config.weights.man_coverage

    def receiver_roll(
        self,
        receiver: Player,
        step: RouteStep,
        is_break: bool,
        rng: random.Random,
    ) -> float:
        roll = weighted_roll(
            receiver.attributes,
            self.config.weights.receiver_separation,
            rng,
            self.config.variance_factor,
        )
        if step.crossing:
            roll += crossing_bonus(receiver)
        if is_break:
            roll += break_bonus(receiver)
        return roll

    def defender_roll(
        self,
        defender: Player,
        coverage_type: CoverageType,
        crossing: bool,
        rng: random.Random,
    ) -> float:
        roll = weighted_roll(
            defender.attributes,
            self.coverage_weights(coverage_type),
            rng,
            self.config.variance_factor,
        )
        if crossing:
            roll -= crossing_penalty(defender)
        return roll

    def resolve_receiver(
        self,
        receiver_state: ReceiverState,
        round_number: int,
        matchup: Matchup,
        rng: random.Random,
    ) -> ReceiverState:
        """Advance one receiver along the route and measure separation."""
        step = receiver_state.route.step(round_number)
        moved = replace(
            receiver_state,
            current_depth=step.target_depth,
            crossing=step.crossing,
        )

        if not receiver_state.is_covered:
            return replace(moved, separation_margin=WIDE_OPEN_MARGIN, primary_defender_id=None)

        receiver = matchup.player(receiver_state.player_id)
        receiver_roll = self.receiver_roll(
            receiver, step, receiver_state.route.is_break(round_number), rng
        )

        best_roll: Optional[float] = None
        primary_id = None
        for defender_id in receiver_state.covered_by:
            roll = self.defender_roll(
                matchup.player(defender_id), matchup.coverage_type, step.crossing, rng
            )
            if best_roll is None or roll > best_roll:
                best_roll = roll
                primary_id = defender_id

        if len(receiver_state.covered_by) > 1:
            best_roll += DOUBLE_COVERAGE_BONUS

        return replace(
            moved,
            separation_margin=receiver_roll - best_roll,
            primary_defender_id=primary_id,
        )

    def resolve_round(
        self,
        state: PlayState,
        matchup: Matchup,
        rng: random.Random,
    ) -> PlayState:
        receivers = [
            self.resolve_receiver(r, state.round, matchup, rng) for r in state.receivers
        ]
        for r in receivers:
            logger.debug(
                f"Round {state.round} {r.route.name}: depth {r.current_depth:.0f}, "
                f"separation {r.separation_margin:+.1f}"
            )
        return state.with_receivers(receivers).advance(phase=PlayPhase.AWAITING_CATCH_CALC)
