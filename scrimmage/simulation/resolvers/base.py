"""Base interfaces for play and drive resolution."""

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from scrimmage.core.models import DefensiveUnit, DriveResult, FieldPosition, OffensiveUnit, PlayResult


class PlayResolver(ABC):
    """
    Protocol for pass play resolution strategies.

    The drive loop only needs a PlayResult back, so a resolver may model
    the play however it likes as long as it draws all randomness from
    the stream it is given.
    """

    @abstractmethod
    def resolve_play(
        self,
        offense: "OffensiveUnit",
        defense: "DefensiveUnit",
        field_position: "FieldPosition",
        rng: random.Random,
    ) -> "PlayResult":
        """
        Simulate a single play and return the result.

        Args:
            offense: Offensive unit (read-only)
            defense: Defensive unit (read-only)
            field_position: Down, distance and spot before the snap
            rng: Random stream owned by the caller

        Returns:
            PlayResult containing outcome, yards and attributions
        """
        ...


class DriveResolver(ABC):
    """Protocol for possession-level simulation."""

    @abstractmethod
    def resolve_drive(
        self,
        offense: "OffensiveUnit",
        defense: "DefensiveUnit",
        start: "FieldPosition",
        rng: random.Random,
    ) -> "DriveResult":
        """
        Simulate an entire drive and return the result.

        Args:
            offense: Offensive unit
            defense: Defensive unit
            start: Starting field position
            rng: Random stream owned by the caller

        Returns:
            DriveResult containing plays, outcome and points
        """
        ...
