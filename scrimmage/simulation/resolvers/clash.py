"""Weighted rolls and margin tables shared by every clash.

A clash compares two weighted attribute rolls; the signed margin picks
an outcome from an ordered threshold table.
"""

import random
from dataclasses import dataclass
from typing import Generic, Mapping, Sequence, TypeVar

from scrimmage.core.attributes import AttributeSet
from scrimmage.core.errors import InvalidWeightTable

T = TypeVar("T")

DEFAULT_VARIANCE = 0.2


def weighted_total(attributes: AttributeSet, weights: Mapping[str, float]) -> float:
    """
    Sum of attribute * weight over a weight table.

    Skills missing from the set read as the attribute default (50), but
    at least one skill in the table must be present.
    """
    if not weights:
        raise InvalidWeightTable("weight table is empty")
    if not any(skill in attributes for skill in weights):
        raise InvalidWeightTable(
            f"weight table references no known attribute: {sorted(weights)}"
        )
    return sum(attributes.get(skill) * weight for skill, weight in weights.items())


def weighted_roll(
    attributes: AttributeSet,
    weights: Mapping[str, float],
    rng: random.Random,
    variance: float = DEFAULT_VARIANCE,
) -> float:
    """
    Weighted attribute total with symmetric multiplicative variance.

    Consumes exactly one draw from ``rng``; the result lies within
    ``total * (1 +/- variance)``.
    """
    total = weighted_total(attributes, weights)
    u = rng.random()
    return total * (1 + (u - 0.5) * 2 * variance)


def chance(rng: random.Random, probability: float) -> bool:
    """Bernoulli draw for a probability in [0, 1]."""
    return rng.random() < probability


def percent_chance(rng: random.Random, percent: float) -> bool:
    """Bernoulli draw for a percentage in [0, 100]."""
    return rng.random() * 100 < percent


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value between min and max."""
    return max(min_val, min(max_val, value))


@dataclass(frozen=True)
class ThresholdRow(Generic[T]):
    threshold: float
    result: T


class ThresholdTable(Generic[T]):
    """
    Ordered "margin above threshold -> outcome" lookup.

    Rows are checked from the highest threshold down; the first row the
    value clears wins, otherwise the floor applies. ``inclusive`` picks
    between ``>=`` and ``>`` comparisons.

    Example:
        table = ThresholdTable([(20, "big"), (0, "small")], floor="none")
        table.lookup(25)  # "big"
        table.lookup(-3)  # "none"
    """

    def __init__(
        self,
        rows: Sequence[tuple[float, T]],
        floor: T,
        inclusive: bool = False,
    ) -> None:
        self.rows = tuple(
            ThresholdRow(threshold, result)
            for threshold, result in sorted(rows, key=lambda row: -row[0])
        )
        self.floor = floor
        self.inclusive = inclusive

    def lookup(self, value: float) -> T:
        for row in self.rows:
            if value > row.threshold or (self.inclusive and value == row.threshold):
                return row.result
        return self.floor

    def __len__(self) -> int:
        return len(self.rows) + 1
