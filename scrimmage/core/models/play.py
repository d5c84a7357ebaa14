"""Play and drive result models."""

from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from scrimmage.core.enums import DriveOutcome, PlayOutcome
from scrimmage.core.models.field import FieldPosition


def _uuid_or_none(value: Optional[str]) -> Optional[UUID]:
    return UUID(value) if value else None


def _str_or_none(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value else None


_ID_FIELDS = (
    "passer_id",
    "receiver_id",
    "rusher_id",
    "sacker_id",
    "tackler_id",
    "interceptor_id",
    "defender_id",
)


@dataclass(frozen=True)
class PlayResult:
    """
    Result of a simulated play.

    Contains everything the drive loop, statistics and presentation
    layers need; nothing here points back at engine internals.
    """

    # Core outcome
    outcome: PlayOutcome
    yards_gained: int = 0
    rounds: int = 0

    # Player attributions (for statistics)
    passer_id: Optional[UUID] = None
    receiver_id: Optional[UUID] = None
    rusher_id: Optional[UUID] = None  # Scrambling quarterback
    sacker_id: Optional[UUID] = None
    tackler_id: Optional[UUID] = None
    interceptor_id: Optional[UUID] = None
    defender_id: Optional[UUID] = None  # Covering defender on a pass defended

    # Pass details
    air_yards: int = 0
    yards_after_catch: int = 0
    catch_threshold: Optional[float] = None
    separation_margin: Optional[float] = None
    total_pressure: float = 0.0
    is_desperation: bool = False

    # Scoring
    points_scored: int = 0

    # Narrative text for the drive log
    description: str = ""

    @property
    def is_touchdown(self) -> bool:
        return self.outcome == PlayOutcome.TOUCHDOWN

    @property
    def is_turnover(self) -> bool:
        return self.outcome.is_turnover

    @property
    def is_sack(self) -> bool:
        return self.outcome == PlayOutcome.SACK

    @property
    def is_completion(self) -> bool:
        return self.outcome in (PlayOutcome.COMPLETE, PlayOutcome.TOUCHDOWN)

    @property
    def display(self) -> str:
        """Short display of play result."""
        if self.is_touchdown:
            return f"TOUCHDOWN! {self.yards_gained} yards"
        elif self.is_turnover:
            return "INTERCEPTED"
        elif self.is_sack:
            return f"SACK: {abs(self.yards_gained)} yard loss"
        elif self.outcome == PlayOutcome.INCOMPLETE:
            return "Incomplete pass"
        elif self.outcome == PlayOutcome.THROWAWAY:
            return "Thrown away"
        elif self.outcome == PlayOutcome.COMPLETE:
            return f"Complete for {self.yards_gained} yards"
        elif self.outcome == PlayOutcome.SCRAMBLE:
            return f"Scramble for {self.yards_gained} yards"
        elif self.outcome == PlayOutcome.FIELD_GOAL_GOOD:
            return "Field goal GOOD"
        elif self.outcome == PlayOutcome.FIELD_GOAL_MISSED:
            return "Field goal NO GOOD"
        return self.outcome.value.replace("_", " ").title()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        data = {
            "outcome": self.outcome.value,
            "yards_gained": self.yards_gained,
            "rounds": self.rounds,
            "air_yards": self.air_yards,
            "yards_after_catch": self.yards_after_catch,
            "catch_threshold": self.catch_threshold,
            "separation_margin": self.separation_margin,
            "total_pressure": self.total_pressure,
            "is_desperation": self.is_desperation,
            "points_scored": self.points_scored,
            "description": self.description,
        }
        for name in _ID_FIELDS:
            data[name] = _str_or_none(getattr(self, name))
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "PlayResult":
        """Create from dictionary."""
        ids = {name: _uuid_or_none(data.get(name)) for name in _ID_FIELDS}
        return cls(
            outcome=PlayOutcome(data["outcome"]),
            yards_gained=data.get("yards_gained", 0),
            rounds=data.get("rounds", 0),
            air_yards=data.get("air_yards", 0),
            yards_after_catch=data.get("yards_after_catch", 0),
            catch_threshold=data.get("catch_threshold"),
            separation_margin=data.get("separation_margin"),
            total_pressure=data.get("total_pressure", 0.0),
            is_desperation=data.get("is_desperation", False),
            points_scored=data.get("points_scored", 0),
            description=data.get("description", ""),
            **ids,
        )


@dataclass(frozen=True)
class DriveResult:
    """
    Result of a complete possession.

    Produced once per drive; ``plays`` is never empty.
    """

    outcome: DriveOutcome
    plays: tuple[PlayResult, ...] = field(default_factory=tuple)
    start: FieldPosition = field(default_factory=FieldPosition)
    end: FieldPosition = field(default_factory=FieldPosition)

    @property
    def points(self) -> int:
        return self.outcome.points

    @property
    def total_yards(self) -> int:
        """Net scrimmage yards, kicks excluded."""
        return sum(p.yards_gained for p in self.plays if not p.outcome.is_kick)

    @property
    def display(self) -> str:
        """Human-readable drive summary."""
        count = len(self.plays)
        label = {
            DriveOutcome.TOUCHDOWN: "TOUCHDOWN DRIVE",
            DriveOutcome.FIELD_GOAL: "FIELD GOAL",
            DriveOutcome.MISSED_FG: "MISSED FIELD GOAL",
            DriveOutcome.PUNT: "PUNT",
            DriveOutcome.TURNOVER: "TURNOVER",
        }[self.outcome]
        return f"{label}: {count} plays, {self.total_yards} yards"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "outcome": self.outcome.value,
            "points": self.points,
            "total_yards": self.total_yards,
            "start": self.start.to_dict(),
            "end": self.end.to_dict(),
            "plays": [p.to_dict() for p in self.plays],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DriveResult":
        """Create from dictionary."""
        return cls(
            outcome=DriveOutcome(data["outcome"]),
            plays=tuple(PlayResult.from_dict(p) for p in data.get("plays", [])),
            start=FieldPosition.from_dict(data.get("start", {})),
            end=FieldPosition.from_dict(data.get("end", {})),
        )
