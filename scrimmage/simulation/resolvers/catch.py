"""Catch probability.

A receiver's catch threshold comes from hands, separation and depth.
The quarterback's throw is an exponential draw whose mean grows with
inaccuracy and pressure; lower throws are better, and a throw below the
threshold is caught.
"""

import math
from dataclasses import replace

from scrimmage.core.attributes import AttributeSet
from scrimmage.simulation.resolvers.clash import ThresholdTable, clamp
from scrimmage.simulation.state import PlayPhase, PlayState, ReceiverState

MIN_CATCH_THRESHOLD = 5.0
MAX_CATCH_THRESHOLD = 95.0

SEPARATION_ADJUSTMENTS: ThresholdTable[float] = ThresholdTable(
    [(20, 15.0), (10, 8.0), (3, 3.0), (-3, 0.0), (-10, -15.0)],
    floor=-30.0,
    inclusive=True,
)

# Below this margin the catch is contested and focus matters
CONTESTED_MARGIN = 5.0
FOCUS_BASELINE = 70.0
FOCUS_RATE = 0.3

DEEP_PENALTY_START = 15.0
DEEP_PENALTY_RATE = 0.3

ROLL_MEAN_BASE = 79.0
ACCURACY_BASELINE = 75.0
ACCURACY_RATE = 1.7
PRESSURE_RATE = 0.5


def catch_threshold(receiver: AttributeSet, separation_margin: float, depth: float) -> float:
    """
    Probability (0-100) that a receiver catches a catchable ball.

    Args:
        receiver: Receiver attributes (catching, focus)
        separation_margin: Signed separation from coverage this round
        depth: Current route depth in yards

    Returns:
        Threshold clamped to [5, 95]
    """
    threshold = receiver.get("catching") + SEPARATION_ADJUSTMENTS.lookup(separation_margin)
    if separation_margin < CONTESTED_MARGIN:
        threshold += (receiver.get("focus") - FOCUS_BASELINE) * FOCUS_RATE
    threshold -= max(0.0, (depth - DEEP_PENALTY_START) * DEEP_PENALTY_RATE)
    return clamp(threshold, MIN_CATCH_THRESHOLD, MAX_CATCH_THRESHOLD)


def qb_accuracy(quarterback: AttributeSet) -> float:
    return (quarterback.get("throwing") + quarterback.get("awareness")) / 2


def roll_mean(quarterback: AttributeSet, total_pressure: float) -> float:
    """Mean of the exponential throw-quality draw."""
    return (
        ROLL_MEAN_BASE
        + (ACCURACY_BASELINE - qb_accuracy(quarterback)) * ACCURACY_RATE
        + total_pressure * PRESSURE_RATE
    )


def effective_completion_pct(threshold: float, mean: float) -> float:
    """Chance (0-100) that an exponential throw lands under the threshold."""
    return (1 - math.exp(-threshold / mean)) * 100


class CatchProbabilityCalculator:
    """Refreshes every receiver's threshold and completion odds for a round."""

    def evaluate(self, receiver_state: ReceiverState, receiver: AttributeSet, mean: float) -> ReceiverState:
        threshold = catch_threshold(
            receiver, receiver_state.separation_margin, receiver_state.current_depth
        )
        return replace(
            receiver_state,
            catch_probability=threshold,
            roll_mean=mean,
            completion_pct=effective_completion_pct(threshold, mean),
        )

    def resolve_round(self, state: PlayState, matchup) -> PlayState:
        mean = roll_mean(matchup.quarterback.attributes, state.total_pressure)
        receivers = [
            self.evaluate(r, matchup.player(r.player_id).attributes, mean)
            for r in state.receivers
        ]
        return state.with_receivers(receivers).advance(phase=PlayPhase.AWAITING_QB_DECISION)
