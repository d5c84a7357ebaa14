"""Shared pytest fixtures for scrimmage tests."""

import random

import pytest

from scrimmage.config import DEFAULT_CONFIG, RouteStep, RouteTemplate
from scrimmage.core.enums import FieldZone, Position
from scrimmage.core.models import FieldPosition
from scrimmage.generators import build_defense, build_offense, build_player
from scrimmage.simulation.matchups import build_matchup
from scrimmage.simulation.state import ReceiverState


class ScriptedRandom(random.Random):
    """
    random.Random whose ``random()`` replays a script.

    Once the script runs out it falls back to the seeded stream.
    ``uniform`` is built on ``random()`` and so follows the script;
    ``randint`` and ``choice`` stay on the seeded bit stream.
    """

    def __init__(self, values=(), seed: int = 0):
        super().__init__(seed)
        self.script = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        if self.script:
            return self.script.pop(0)
        return super().random()

    def getrandbits(self, k):
        return super().getrandbits(k)


def make_route(depths=(2, 4, 6, 8, 10), crossing=(), break_round=None, name="test") -> RouteTemplate:
    """Route template from five depths; ``crossing`` lists 1-based crossing rounds."""
    return RouteTemplate(
        name=name,
        steps=tuple(
            RouteStep(target_depth=depth, crossing=(i + 1) in crossing)
            for i, depth in enumerate(depths)
        ),
        break_round=break_round,
    )


# =============================================================================
# Random streams
# =============================================================================


@pytest.fixture
def scripted():
    """Factory for scripted random streams."""
    return ScriptedRandom


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


# =============================================================================
# Units and matchups
# =============================================================================


@pytest.fixture
def offense():
    """Balanced offense, every attribute 70."""
    return build_offense(70)


@pytest.fixture
def defense():
    """Man defense, every attribute 70."""
    return build_defense(70)


@pytest.fixture
def matchup(offense, defense):
    return build_matchup(offense, defense)


@pytest.fixture
def receiver():
    return build_player(Position.WR, 70, name="Receiver")


@pytest.fixture
def cornerback():
    return build_player(Position.CB, 70, name="Corner")


# =============================================================================
# Routes and field positions
# =============================================================================


@pytest.fixture
def straight_route() -> RouteTemplate:
    """Medium route with no crossing or break."""
    return make_route()


@pytest.fixture
def standard_routes():
    return DEFAULT_CONFIG.routes_for(FieldZone.STANDARD)


@pytest.fixture
def own_25() -> FieldPosition:
    """1st and 10 at own 25."""
    return FieldPosition(yards_from_goal=75, yards_to_go=10, down=1)


@pytest.fixture
def red_zone() -> FieldPosition:
    return FieldPosition(yards_from_goal=15, yards_to_go=10, down=1)


@pytest.fixture
def make_receiver_state(straight_route):
    """Factory for receiver snapshots."""

    def _make(player_id, route=None, **kwargs) -> ReceiverState:
        return ReceiverState(player_id=player_id, route=route or straight_route, **kwargs)

    return _make


@pytest.fixture
def route_factory():
    """Factory for custom route templates."""
    return make_route
