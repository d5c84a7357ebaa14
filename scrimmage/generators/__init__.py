"""Sample unit generators."""

from scrimmage.generators.units import build_defense, build_offense, build_player

__all__ = [
    "build_defense",
    "build_offense",
    "build_player",
]
