"""Skill definitions read by the clash resolvers."""

from dataclasses import dataclass
from enum import Enum

ATTRIBUTE_MIN = 0
ATTRIBUTE_MAX = 100


class AttributeCategory(Enum):
    """Which side of a clash a skill mostly feeds."""

    MOVEMENT = "movement"
    MENTAL = "mental"
    PASSING = "passing"
    RECEIVING = "receiving"
    PROTECTION = "protection"
    RUSH = "rush"
    COVERAGE = "coverage"
    TACKLING = "tackling"


@dataclass(frozen=True)
class AttributeDefinition:
    """A named skill; participants carry a value for it in an AttributeSet."""

    name: str
    category: AttributeCategory
    abbreviation: str
    description: str = ""


def clamp_rating(value: float) -> float:
    return max(ATTRIBUTE_MIN, min(ATTRIBUTE_MAX, value))


def _skill(name: str, category: AttributeCategory, abbreviation: str, description: str) -> AttributeDefinition:
    return AttributeDefinition(name, category, abbreviation, description)


ALL_ATTRIBUTES = (
    # Movement
    _skill("speed", AttributeCategory.MOVEMENT, "SPD", "Top running speed"),
    _skill("acceleration", AttributeCategory.MOVEMENT, "ACC", "How quickly top speed is reached"),
    _skill("agility", AttributeCategory.MOVEMENT, "AGI", "Quickness changing direction"),
    _skill("strength", AttributeCategory.MOVEMENT, "STR", "Raw power at the line"),
    _skill("balance", AttributeCategory.MOVEMENT, "BAL", "Staying upright through contact"),
    # Mental
    _skill("awareness", AttributeCategory.MENTAL, "AWR", "Reading the field"),
    _skill("focus", AttributeCategory.MENTAL, "FOC", "Concentration in traffic"),
    # Passing and receiving
    _skill("throwing", AttributeCategory.PASSING, "THR", "Accuracy and touch"),
    _skill("catching", AttributeCategory.RECEIVING, "CTH", "Securing the ball"),
    _skill("route_running", AttributeCategory.RECEIVING, "RTE", "Crisp breaks and stems"),
    _skill("release", AttributeCategory.RECEIVING, "REL", "Beating press at the line"),
    # Line play
    _skill("pass_block", AttributeCategory.PROTECTION, "PBK", "Anchoring against the rush"),
    _skill("pass_rush", AttributeCategory.RUSH, "PRS", "Beating blockers to the quarterback"),
    # Coverage and tackling
    _skill("man_coverage", AttributeCategory.COVERAGE, "MCV", "Mirroring a receiver"),
    _skill("zone_coverage", AttributeCategory.COVERAGE, "ZCV", "Reading zone landmarks"),
    _skill("pursuit", AttributeCategory.TACKLING, "PUR", "Closing angles"),
    _skill("tackling", AttributeCategory.TACKLING, "TAK", "Wrapping up ball carriers"),
    _skill("hit_power", AttributeCategory.TACKLING, "POW", "Force at contact"),
)
