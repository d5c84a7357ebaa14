"""Quarterback decision making.

Each round the quarterback scans the receivers, scores every one noticed
using the trait profile, and decides whether to let the ball go.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from scrimmage.config import DEFAULT_CONFIG, EngineConfig, TraitProfile
from scrimmage.core.attributes import AttributeSet
from scrimmage.core.models import FieldPosition
from scrimmage.simulation.resolvers.clash import percent_chance, weighted_roll
from scrimmage.simulation.state import PlayState, ReceiverState

logger = logging.getLogger(__name__)

# Vision
NOTICE_BASE = 70.0
VISION_NOISE = 10.0

# Scoring
SHORT_OF_MARKER_PER_ROUND = 3.0
LATE_DOWN = 3
LATE_DOWN_PENALTY = 15.0
NOT_OPEN_PENALTY = 20.0
CONTESTED_MARGIN = 5.0

# Throw likelihood
PRESSURE_URGENCY_RATE = 0.5
ROUND_URGENCY = 8.0
PANIC_PRESSURE = 70.0
PANIC_BONUS = 30.0
THROWAWAY_PRESSURE_RATE = 0.5
THROWAWAY_ROUND_URGENCY = 10.0


@dataclass(frozen=True)
class QBDecision:
    """What the quarterback did this round."""

    throw: bool
    target_id: Optional[UUID] = None
    likelihood: float = 0.0
    visible_ids: tuple[UUID, ...] = ()
    scores: dict[UUID, float] = field(default_factory=dict)

    @property
    def is_throwaway(self) -> bool:
        """Threw with nobody open to throw to."""
        return self.throw and self.target_id is None


def score_receiver(
    receiver: ReceiverState,
    field_position: FieldPosition,
    round_number: int,
    profile: TraitProfile,
) -> float:
    """
    Trait-weighted utility of throwing to a receiver.

    Starts from the catch threshold, rewards reaching the line to gain,
    punishes receivers below the trait's open threshold, and scales
    contested targets by the trait's aggressiveness.
    """
    score = receiver.catch_probability
    if receiver.current_depth >= field_position.yards_to_go:
        score += profile.first_down_bias
    else:
        score -= round_number * SHORT_OF_MARKER_PER_ROUND
        if field_position.down >= LATE_DOWN:
            score -= LATE_DOWN_PENALTY
    if receiver.catch_probability < profile.open_threshold:
        score -= NOT_OPEN_PENALTY
    if receiver.separation_margin < CONTESTED_MARGIN:
        score *= profile.aggressiveness
    return score


def throw_likelihood(
    candidate_score: Optional[float],
    total_pressure: float,
    round_number: int,
    profile: TraitProfile,
) -> float:
    """Percent chance the ball comes out this round."""
    if candidate_score is None:
        return total_pressure * THROWAWAY_PRESSURE_RATE + round_number * THROWAWAY_ROUND_URGENCY
    likelihood = (
        candidate_score
        + total_pressure * profile.pressure_multiplier * PRESSURE_URGENCY_RATE
        + round_number * ROUND_URGENCY
    )
    if total_pressure > PANIC_PRESSURE:
        likelihood += PANIC_BONUS
    return likelihood


class QuarterbackDecisionEngine:
    """Vision, target scoring and the throw/hold roll."""

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def notices(self, quarterback: AttributeSet, receiver: ReceiverState, rng: random.Random) -> bool:
        """Whether the quarterback sees this receiver this round."""
        vision = weighted_roll(
            quarterback, self.config.weights.qb_vision, rng, self.config.variance_factor
        )
        vision += rng.uniform(-VISION_NOISE, VISION_NOISE)
        return vision >= NOTICE_BASE - receiver.separation_margin

    def decide(
        self,
        state: PlayState,
        quarterback: AttributeSet,
        field_position: FieldPosition,
        rng: random.Random,
    ) -> QBDecision:
        """
        Scan, score and roll for one round.

        Args:
            state: Snapshot after catch probabilities are computed
            quarterback: Passer attributes
            field_position: Down and distance for the play
            rng: Shared random stream

        Returns:
            QBDecision; a throw with no target is a throwaway
        """
        profile = self.config.trait_profile(state.quarterback.trait)

        visible = [r for r in state.receivers if self.notices(quarterback, r, rng)]
        scores = {
            r.player_id: score_receiver(r, field_position, state.round, profile)
            for r in visible
        }

        target_id = None
        best_score = None
        for receiver in visible:
            if best_score is None or scores[receiver.player_id] > best_score:
                best_score = scores[receiver.player_id]
                target_id = receiver.player_id

        likelihood = throw_likelihood(best_score, state.total_pressure, state.round, profile)
        throw = percent_chance(rng, likelihood)

        logger.debug(
            f"Round {state.round} QB: {len(visible)} visible, "
            f"likelihood {likelihood:.1f}%, throw={throw}"
        )
        return QBDecision(
            throw=throw,
            target_id=target_id,
            likelihood=likelihood,
            visible_ids=tuple(r.player_id for r in visible),
            scores=scores,
        )
