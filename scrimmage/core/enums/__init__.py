"""Engine enumerations."""

from scrimmage.core.enums.plays import (
    CoverageType,
    DriveOutcome,
    FieldZone,
    PlayOutcome,
    RouteDepthClass,
)
from scrimmage.core.enums.positions import Position
from scrimmage.core.enums.traits import QBTrait

__all__ = [
    "CoverageType",
    "DriveOutcome",
    "FieldZone",
    "PlayOutcome",
    "Position",
    "QBTrait",
    "RouteDepthClass",
]
