"""Domain models."""

from scrimmage.core.models.field import (
    FIELD_GOAL_RANGE,
    FieldPosition,
    advance_field_position,
)
from scrimmage.core.models.play import DriveResult, PlayResult
from scrimmage.core.models.player import Player
from scrimmage.core.models.team import DefensiveUnit, OffensiveUnit

__all__ = [
    "FIELD_GOAL_RANGE",
    "DefensiveUnit",
    "DriveResult",
    "FieldPosition",
    "OffensiveUnit",
    "PlayResult",
    "Player",
    "advance_field_position",
]
