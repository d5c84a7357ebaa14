"""Event types emitted by the drive loop."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Optional
from uuid import UUID

if TYPE_CHECKING:
    from scrimmage.core.models import DriveResult, FieldPosition, PlayResult


@dataclass
class SimulationEvent:
    """Base class for all simulation events."""

    timestamp: datetime = field(default_factory=datetime.now)
    drive_id: UUID = None

    # Situation when the event fired
    down: int = 1
    yards_to_go: int = 10
    yards_from_goal: int = 75


@dataclass
class DriveStartedEvent(SimulationEvent):
    """Fired before the first snap of a drive."""

    offense_qb_id: UUID = None


@dataclass
class PlayCompletedEvent(SimulationEvent):
    """Fired when a play (or fourth-down kick) is completed."""

    result: "PlayResult" = None
    play_number: int = 1
    field_position: str = ""  # e.g. "2nd & 7 at OPP 35"


@dataclass
class SackEvent(SimulationEvent):
    """Fired when the quarterback goes down behind the line."""

    quarterback_id: UUID = None
    sacker_id: Optional[UUID] = None  # None for a coverage sack with no rusher standing
    yards_lost: int = 0


@dataclass
class ScoringEvent(SimulationEvent):
    """Fired when points are scored."""

    points: int = 0
    scoring_type: str = ""  # "TD", "FG"
    scorer_id: UUID = None
    description: str = ""


@dataclass
class TurnoverEvent(SimulationEvent):
    """Fired on an interception."""

    turnover_type: str = "INT"
    player_who_lost_id: UUID = None  # Passer
    player_who_gained_id: UUID = None  # Interceptor


@dataclass
class DriveCompletedEvent(SimulationEvent):
    """Fired once a drive has a terminal result."""

    result: "DriveResult" = None
    end: "FieldPosition" = None
