"""Positions that take part in a dropback."""

from enum import Enum


class Position(Enum):
    """
    Roster position of a participant.

    The engine never reads a position to decide an outcome, with one
    exception: safeties get a pursuit bonus when chasing a ball carrier.
    Unit membership (passer, target, blocker, rusher, coverage) comes from
    where a player is listed on the offensive or defensive unit.
    """

    # Passer and targets
    QB = "QB"
    WR = "WR"
    TE = "TE"
    RB = "RB"

    # Pass protection, left to right
    LT = "LT"
    LG = "LG"
    C = "C"
    RG = "RG"
    RT = "RT"

    # Pass rush
    DE = "DE"
    DT = "DT"
    OLB = "OLB"

    # Coverage
    CB = "CB"
    MLB = "MLB"
    FS = "FS"
    SS = "SS"

    @property
    def is_safety(self) -> bool:
        return self in (Position.FS, Position.SS)

