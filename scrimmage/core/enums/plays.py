"""Play and drive enumerations."""

from enum import Enum


class PlayOutcome(str, Enum):
    """Terminal outcome of a single play."""

    # Passing outcomes
    SACK = "sack"
    THROWAWAY = "throwaway"
    INCOMPLETE = "incomplete"
    INTERCEPTION = "interception"
    COMPLETE = "complete"
    TOUCHDOWN = "touchdown"
    SCRAMBLE = "scramble"

    # Fourth-down kicks
    FIELD_GOAL_GOOD = "field_goal_good"
    FIELD_GOAL_MISSED = "field_goal_missed"
    PUNT = "punt"

    @property
    def is_turnover(self) -> bool:
        """Check if this outcome gives the ball to the defense."""
        return self == PlayOutcome.INTERCEPTION

    @property
    def is_kick(self) -> bool:
        """Check if this is a special teams play."""
        return self in {
            PlayOutcome.FIELD_GOAL_GOOD,
            PlayOutcome.FIELD_GOAL_MISSED,
            PlayOutcome.PUNT,
        }

    @property
    def is_pass_attempt(self) -> bool:
        """Check if the ball was thrown at a receiver."""
        return self in {
            PlayOutcome.INCOMPLETE,
            PlayOutcome.INTERCEPTION,
            PlayOutcome.COMPLETE,
            PlayOutcome.TOUCHDOWN,
        }


class DriveOutcome(str, Enum):
    """How a possession ended."""

    TOUCHDOWN = "touchdown"
    TURNOVER = "turnover"
    FIELD_GOAL = "field_goal"
    MISSED_FG = "missed_fg"
    PUNT = "punt"

    @property
    def points(self) -> int:
        return {DriveOutcome.TOUCHDOWN: 7, DriveOutcome.FIELD_GOAL: 3}.get(self, 0)


class FieldZone(str, Enum):
    """Field zones used to pick route catalogs."""

    GOALLINE = "goalline"  # 8 yards or closer
    REDZONE = "redzone"    # 20 yards or closer
    STANDARD = "standard"

    @classmethod
    def from_yards_from_goal(cls, yards_from_goal: float) -> "FieldZone":
        if yards_from_goal <= 8:
            return cls.GOALLINE
        if yards_from_goal <= 20:
            return cls.REDZONE
        return cls.STANDARD


class CoverageType(str, Enum):
    """Coverage family called by the defense."""

    MAN = "man"
    ZONE = "zone"


class RouteDepthClass(str, Enum):
    """Depth bucket of a route template, by its deepest step."""

    SHORT = "short"    # under 6 yards
    MEDIUM = "medium"  # 6 to 15 yards
    DEEP = "deep"      # beyond 15 yards

    @classmethod
    def from_max_depth(cls, depth: float) -> "RouteDepthClass":
        if depth < 6:
            return cls.SHORT
        if depth <= 15:
            return cls.MEDIUM
        return cls.DEEP
