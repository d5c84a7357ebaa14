"""Sample units for demos, the CLI and tests.

Every participant gets the same rating in every attribute, so results
depend only on the rating gap between the units.
"""

from typing import Optional

from scrimmage.core.attributes import AttributeSet
from scrimmage.core.enums import CoverageType, Position, QBTrait
from scrimmage.core.models import DefensiveUnit, OffensiveUnit, Player

OFFENSIVE_LINE = (Position.LT, Position.LG, Position.C, Position.RG, Position.RT)
RECEIVER_POSITIONS = (Position.WR, Position.WR, Position.TE, Position.WR, Position.RB)
DEFENSIVE_LINE = (Position.DE, Position.DT, Position.DT, Position.DE)
COVERAGE_POSITIONS = (Position.CB, Position.CB, Position.FS, Position.SS, Position.CB)


def build_player(
    position: Position,
    rating: float = 70,
    name: Optional[str] = None,
    jersey_number: int = 0,
    **overrides: float,
) -> Player:
    """
    Create a player with a flat rating.

    Args:
        position: Player position
        rating: Value for every attribute
        name: Last name (defaults to the position code)
        jersey_number: Jersey number
        **overrides: Individual attribute values

    Returns:
        Player with a uniform AttributeSet
    """
    attributes = AttributeSet.uniform(rating).with_values(**overrides)
    return Player(
        last_name=name or position.value,
        position=position,
        attributes=attributes,
        jersey_number=jersey_number,
    )


def _numbered(positions, count: int, rating: float) -> list[Player]:
    players = []
    seen: dict[Position, int] = {}
    for index in range(count):
        position = positions[index % len(positions)]
        seen[position] = seen.get(position, 0) + 1
        players.append(
            build_player(position, rating, name=f"{position.value}{seen[position]}", jersey_number=index + 10)
        )
    return players


def build_offense(
    rating: float = 70,
    trait: QBTrait = QBTrait.BALANCED,
    receivers: int = 3,
    linemen: int = 5,
) -> OffensiveUnit:
    """Offense with a quarterback, ``receivers`` targets and ``linemen`` blockers."""
    return OffensiveUnit(
        quarterback=build_player(Position.QB, rating, name="QB1", jersey_number=1),
        receivers=_numbered(RECEIVER_POSITIONS, receivers, rating),
        linemen=_numbered(OFFENSIVE_LINE, linemen, rating),
        trait=trait,
    )


def build_defense(
    rating: float = 70,
    coverage_type: CoverageType = CoverageType.MAN,
    linemen: int = 4,
    coverage: int = 4,
) -> DefensiveUnit:
    """Defense with ``linemen`` rushers and ``coverage`` defenders."""
    return DefensiveUnit(
        linemen=_numbered(DEFENSIVE_LINE, linemen, rating),
        coverage=_numbered(COVERAGE_POSITIONS, coverage, rating),
        coverage_type=coverage_type,
    )
