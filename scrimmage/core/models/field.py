"""Field position and down/distance tracking."""

from dataclasses import dataclass, replace

from scrimmage.core.enums import FieldZone


@dataclass(frozen=True)
class FieldPosition:
    """
    Ball spot and down/distance for the offense.

    ``yards_from_goal`` counts down to the opponent's goal line
    (0 = goal line, 75 = own 25). Never mutated mid-play; the drive
    loop replaces it between plays with ``advance_field_position``.
    """

    yards_from_goal: int = 75
    yards_to_go: int = 10
    down: int = 1

    def __post_init__(self) -> None:
        if self.yards_from_goal < 0:
            raise ValueError(f"yards_from_goal must be >= 0, got {self.yards_from_goal}")
        if self.down < 1:
            raise ValueError(f"down must be >= 1, got {self.down}")

    @property
    def zone(self) -> FieldZone:
        """Route catalog zone for this spot."""
        return FieldZone.from_yards_from_goal(self.yards_from_goal)

    @property
    def is_kicking_down(self) -> bool:
        """The offense kicks instead of running a play on 4th down."""
        return self.down >= 4

    @property
    def in_field_goal_range(self) -> bool:
        return self.yards_from_goal <= FIELD_GOAL_RANGE

    @property
    def display(self) -> str:
        """Down and distance, e.g. '3rd & 7 at OPP 35'."""
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.down, "th")
        if self.yards_from_goal > 50:
            spot = f"OWN {100 - self.yards_from_goal}"
        elif self.yards_from_goal == 50:
            spot = "50"
        else:
            spot = f"OPP {self.yards_from_goal}"
        return f"{self.down}{suffix} & {self.yards_to_go} at {spot}"

    def to_dict(self) -> dict:
        return {
            "yards_from_goal": self.yards_from_goal,
            "yards_to_go": self.yards_to_go,
            "down": self.down,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "FieldPosition":
        return cls(
            yards_from_goal=data.get("yards_from_goal", 75),
            yards_to_go=data.get("yards_to_go", 10),
            down=data.get("down", 1),
        )


# Longest spot (in yards from goal) the offense will try a field goal from
FIELD_GOAL_RANGE = 40


def advance_field_position(position: FieldPosition, yards_gained: int) -> FieldPosition:
    """
    Apply a play's yardage to the field position.

    Yards are subtracted from ``yards_from_goal`` (clamped at the goal
    line). Reaching the line to gain resets to 1st and 10; otherwise the
    distance shrinks (or grows on a loss) and the down advances.
    """
    yards_from_goal = max(0, position.yards_from_goal - yards_gained)
    if yards_gained >= position.yards_to_go:
        return FieldPosition(yards_from_goal=yards_from_goal, yards_to_go=10, down=1)
    return replace(
        position,
        yards_from_goal=yards_from_goal,
        yards_to_go=position.yards_to_go - yards_gained,
        down=position.down + 1,
    )
