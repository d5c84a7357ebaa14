"""Quarterback decision-making traits."""

from enum import Enum


class QBTrait(str, Enum):
    """
    Closed set of quarterback personalities.

    Each trait maps to a TraitProfile in the engine configuration that
    tunes how the quarterback weighs open receivers, pressure and risk.
    """

    GUNSLINGER = "gunslinger"
    GAME_MANAGER = "game_manager"
    BALANCED = "balanced"
    SCRAMBLER = "scrambler"
