"""Throw resolution: completion, incompletion or interception."""

import logging
import math
import random
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from scrimmage.core.models import Player
from scrimmage.simulation.resolvers.clash import clamp, percent_chance
from scrimmage.simulation.state import ReceiverState

logger = logging.getLogger(__name__)

BADNESS_RATE = 0.4
MAX_BADNESS_CHANCE = 25.0
AWARENESS_BASELINE = 60.0
AWARENESS_RATE = 0.2
HANDS_BASELINE = 50.0
HANDS_RATE = 0.1
BLANKETED_MARGIN = -10.0
BLANKETED_BONUS = 5.0
MIN_INT_CHANCE = 5.0
MAX_INT_CHANCE = 35.0

# Desperation heaves are judged against a discounted threshold
DESPERATION_DISCOUNT = 0.7


@dataclass(frozen=True)
class ThrowResult:
    """Outcome of one pass attempt, before yards after catch."""

    completed: bool
    qb_roll: float
    threshold: float
    defender_id: Optional[UUID] = None
    interception_checked: bool = False
    interception_chance: Optional[float] = None
    interceptor_id: Optional[UUID] = None

    @property
    def intercepted(self) -> bool:
        return self.interceptor_id is not None


def draw_qb_roll(mean: float, rng: random.Random) -> float:
    """Exponential throw-quality draw; lower is better."""
    # 1 - random() lies in (0, 1], so the log is always defined
    u = 1.0 - rng.random()
    return -mean * math.log(u)


def interception_chance(throw_badness: float, defender: Player, separation_margin: float) -> float:
    """
    Percent chance an errant throw is picked off.

    Args:
        throw_badness: How far the throw roll missed the threshold
        defender: Defender in position to make the play
        separation_margin: Receiver's separation (negative when beaten)

    Returns:
        Chance clamped to [5, 35]
    """
    pct = clamp(throw_badness * BADNESS_RATE, 0, MAX_BADNESS_CHANCE)
    pct += (defender.get_attribute("awareness") - AWARENESS_BASELINE) * AWARENESS_RATE
    pct += (defender.get_attribute("catching") - HANDS_BASELINE) * HANDS_RATE
    if separation_margin < BLANKETED_MARGIN:
        pct += BLANKETED_BONUS
    return clamp(pct, MIN_INT_CHANCE, MAX_INT_CHANCE)


class ThrowResolver:
    """Compares the throw draw with the receiver's catch threshold."""

    def resolve(
        self,
        receiver: ReceiverState,
        defender: Optional[Player],
        rng: random.Random,
        discount: float = 1.0,
    ) -> ThrowResult:
        """
        Resolve a throw to ``receiver``.

        The interception check runs only for an incomplete pass with a
        covering defender who has the receiver beaten (margin < 0).
        """
        threshold = receiver.catch_probability * discount
        qb_roll = draw_qb_roll(receiver.roll_mean, rng)
        defender_id = defender.id if defender else None

        if qb_roll < threshold:
            logger.debug(f"Throw {qb_roll:.1f} under threshold {threshold:.1f}: caught")
            return ThrowResult(True, qb_roll, threshold, defender_id=defender_id)

        if defender is None or receiver.separation_margin >= 0:
            return ThrowResult(False, qb_roll, threshold, defender_id=defender_id)

        pct = interception_chance(qb_roll - threshold, defender, receiver.separation_margin)
        picked = percent_chance(rng, pct)
        logger.debug(f"Throw {qb_roll:.1f} over threshold {threshold:.1f}: INT check {pct:.1f}% -> {picked}")
        return ThrowResult(
            False,
            qb_roll,
            threshold,
            defender_id=defender_id,
            interception_checked=True,
            interception_chance=pct,
            interceptor_id=defender.id if picked else None,
        )
