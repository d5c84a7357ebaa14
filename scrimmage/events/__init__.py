"""Event system for drive simulation."""

from scrimmage.events.bus import EventBus
from scrimmage.events.types import (
    DriveCompletedEvent,
    DriveStartedEvent,
    PlayCompletedEvent,
    SackEvent,
    ScoringEvent,
    SimulationEvent,
    TurnoverEvent,
)

__all__ = [
    "DriveCompletedEvent",
    "DriveStartedEvent",
    "EventBus",
    "PlayCompletedEvent",
    "SackEvent",
    "ScoringEvent",
    "SimulationEvent",
    "TurnoverEvent",
]
