"""Engine exceptions."""


class ScrimmageError(Exception):
    """Base exception for play engine errors."""
    pass


class InvalidWeightTable(ScrimmageError, ValueError):
    """Raised when a weight table is empty or matches no attribute."""
    pass


class EmptyRosterError(ScrimmageError):
    """Raised when a required position group has no players."""

    def __init__(self, group: str):
        super().__init__(f"Position group '{group}' is empty")
        self.group = group


class ExhaustedRoundsWithoutResolution(ScrimmageError):
    """Raised when a play runs out of rounds without a terminal result."""

    def __init__(self, rounds: int):
        super().__init__(f"Play exhausted {rounds} rounds without a result")
        self.rounds = rounds
