"""In-memory drive log for accumulating play-by-play events."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from scrimmage.core.enums import PlayOutcome
from scrimmage.core.models import FieldPosition
from scrimmage.events import (
    DriveCompletedEvent,
    DriveStartedEvent,
    EventBus,
    PlayCompletedEvent,
    ScoringEvent,
    TurnoverEvent,
)


@dataclass
class LogEntry:
    """Single entry in the drive log."""

    timestamp: datetime
    drive_number: int
    event_type: str  # "PLAY", "SCORE", "TURNOVER"
    description: str

    # Optional play details
    play_number: Optional[int] = None
    down: Optional[int] = None
    yards_to_go: Optional[int] = None
    field_position: Optional[str] = None
    yards_gained: Optional[int] = None
    is_scoring_play: bool = False
    is_turnover: bool = False
    is_sack: bool = False
    is_complete: bool = False


@dataclass
class ScoringPlay:
    """Record of a scoring play."""

    drive_number: int
    scoring_type: str  # "TD", "FG"
    points: int
    description: str
    total_points_after: int


@dataclass
class DriveSummary:
    """One finished drive."""

    drive_number: int
    start: str
    outcome: str
    points: int
    plays: int
    yards: int


class DriveLog:
    """
    In-memory accumulator for drive events.

    Subscribes to an EventBus for automatic logging; feeds the markdown
    writer.
    """

    def __init__(self) -> None:
        self.entries: list[LogEntry] = []
        self.scoring_plays: list[ScoringPlay] = []
        self.drives: list[DriveSummary] = []
        self.total_points = 0
        self._drive_number = 0
        self._drive_start = ""

    def connect_to_event_bus(self, event_bus: EventBus) -> None:
        """Subscribe to events from an event bus."""
        event_bus.subscribe(DriveStartedEvent, self._handle_drive_started)
        event_bus.subscribe(PlayCompletedEvent, self._handle_play_completed)
        event_bus.subscribe(ScoringEvent, self._handle_scoring)
        event_bus.subscribe(TurnoverEvent, self._handle_turnover)
        event_bus.subscribe(DriveCompletedEvent, self._handle_drive_completed)

    def add_entry(self, event_type: str, description: str, **kwargs) -> None:
        """Add a log entry manually."""
        self.entries.append(
            LogEntry(
                timestamp=datetime.now(),
                drive_number=self._drive_number,
                event_type=event_type,
                description=description,
                **kwargs,
            )
        )

    def _handle_drive_started(self, event: DriveStartedEvent) -> None:
        self._drive_number += 1
        self._drive_start = FieldPosition(event.yards_from_goal, event.yards_to_go, event.down).display

    def _handle_play_completed(self, event: PlayCompletedEvent) -> None:
        result = event.result
        self.add_entry(
            "PLAY",
            result.description or result.display,
            play_number=event.play_number,
            down=event.down,
            yards_to_go=event.yards_to_go,
            field_position=event.field_position,
            yards_gained=result.yards_gained,
            is_scoring_play=result.points_scored > 0,
            is_turnover=result.is_turnover,
            is_sack=result.is_sack,
            is_complete=result.outcome in (PlayOutcome.COMPLETE, PlayOutcome.TOUCHDOWN),
        )

    def _handle_scoring(self, event: ScoringEvent) -> None:
        self.total_points += event.points
        self.scoring_plays.append(
            ScoringPlay(
                drive_number=self._drive_number,
                scoring_type=event.scoring_type,
                points=event.points,
                description=event.description,
                total_points_after=self.total_points,
            )
        )
        self.add_entry("SCORE", f"{event.scoring_type}: {event.description}", is_scoring_play=True)

    def _handle_turnover(self, event: TurnoverEvent) -> None:
        self.add_entry("TURNOVER", f"Turnover ({event.turnover_type})", is_turnover=True)

    def _handle_drive_completed(self, event: DriveCompletedEvent) -> None:
        drive = event.result
        self.drives.append(
            DriveSummary(
                drive_number=self._drive_number,
                start=self._drive_start,
                outcome=drive.outcome.value,
                points=drive.points,
                plays=len(drive.plays),
                yards=drive.total_yards,
            )
        )

    def get_scoring_summary(self) -> list[ScoringPlay]:
        return list(self.scoring_plays)

    def get_plays_by_drive(self) -> dict[int, list[LogEntry]]:
        """Play entries grouped by drive number."""
        by_drive: dict[int, list[LogEntry]] = {}
        for entry in self.entries:
            if entry.event_type == "PLAY":
                by_drive.setdefault(entry.drive_number, []).append(entry)
        return by_drive

    def clear(self) -> None:
        self.entries.clear()
        self.scoring_plays.clear()
        self.drives.clear()
        self.total_points = 0
        self._drive_number = 0
