"""Tests for route selection."""

import random

import pytest

from scrimmage.config import DEFAULT_CONFIG
from scrimmage.core.enums import FieldZone, Position, RouteDepthClass
from scrimmage.core.models import FieldPosition
from scrimmage.generators import build_player
from scrimmage.simulation.resolvers.routes import RouteSelector


def receivers_with_speeds(*speeds):
    return [build_player(Position.WR, 70, name=f"WR{i}", speed=s) for i, s in enumerate(speeds)]


class TestRouteSpread:
    """Three or more receivers always get a short, a medium and a deep route."""

    def test_fastest_runs_deep(self, own_25, rng):
        receivers = receivers_with_speeds(80, 95, 70)
        routes = RouteSelector().select(receivers, own_25, rng)

        classes = [template.depth_class for _, template in routes]
        assert classes == [RouteDepthClass.MEDIUM, RouteDepthClass.DEEP, RouteDepthClass.SHORT]

    def test_speed_ties_keep_read_order(self, own_25, rng):
        receivers = receivers_with_speeds(70, 70, 70)
        routes = RouteSelector().select(receivers, own_25, rng)

        classes = [template.depth_class for _, template in routes]
        assert classes == [RouteDepthClass.DEEP, RouteDepthClass.MEDIUM, RouteDepthClass.SHORT]

    def test_returned_in_read_order(self, own_25, rng):
        receivers = receivers_with_speeds(60, 99, 80, 75)
        routes = RouteSelector().select(receivers, own_25, rng)
        assert [player for player, _ in routes] == receivers

    def test_extra_receivers_draw_from_zone(self, own_25):
        catalog = DEFAULT_CONFIG.routes_for(FieldZone.STANDARD)
        receivers = receivers_with_speeds(70, 70, 70, 70, 70)
        for seed in range(20):
            routes = RouteSelector().select(receivers, own_25, random.Random(seed))
            assert all(template in catalog for _, template in routes[3:])

    @pytest.mark.parametrize("seed", range(10))
    def test_every_play_has_all_three_depths(self, own_25, seed):
        receivers = receivers_with_speeds(85, 72, 90, 66)
        routes = RouteSelector().select(receivers, own_25, random.Random(seed))
        assert {t.depth_class for _, t in routes[:3]} == set(RouteDepthClass)

    @pytest.mark.parametrize("seed", range(5))
    def test_goal_line_spread_reaches_end_zone(self, offense, seed):
        position = FieldPosition(yards_from_goal=5, yards_to_go=5, down=1)
        routes = RouteSelector().select(offense.receivers, position, random.Random(seed))
        assert {t.depth_class for _, t in routes} == set(RouteDepthClass)


class TestShortHandedOffense:
    """Fewer than three receivers: the first one goes for the sticks."""

    @pytest.mark.parametrize(
        "yards_to_go, expected",
        [(3, RouteDepthClass.SHORT), (10, RouteDepthClass.MEDIUM), (22, RouteDepthClass.DEEP)],
    )
    def test_first_receiver_matches_distance(self, rng, yards_to_go, expected):
        position = FieldPosition(yards_from_goal=60, yards_to_go=yards_to_go, down=2)
        routes = RouteSelector().select(receivers_with_speeds(70, 90), position, rng)
        assert routes[0][1].depth_class == expected

    def test_goal_line_long_yardage_runs_back_fade(self, rng):
        position = FieldPosition(yards_from_goal=5, yards_to_go=20, down=1)
        routes = RouteSelector().select(receivers_with_speeds(70), position, rng)
        assert routes[0][1].name == "back_fade"
        assert routes[0][1].depth_class == RouteDepthClass.DEEP

    def test_falls_back_when_zone_has_no_deep_routes(self, route_factory, rng):
        """A missing depth class is served by the nearest one."""
        short = route_factory(depths=(1, 2, 3, 4, 5), name="quick")
        medium = route_factory(depths=(2, 4, 6, 8, 10), name="out")
        config = DEFAULT_CONFIG.with_overrides(
            route_catalog={zone: (short, medium) for zone in FieldZone}
        )
        position = FieldPosition(yards_from_goal=5, yards_to_go=20, down=1)
        routes = RouteSelector(config).select(receivers_with_speeds(70), position, rng)
        assert routes[0][1].name == "out"

    def test_no_receivers(self, own_25, rng):
        assert RouteSelector().select([], own_25, rng) == []


class TestCatalog:
    """Tests for zone catalog grouping."""

    def test_zone_follows_field_position(self, red_zone, rng):
        routes = RouteSelector().select(receivers_with_speeds(90, 80, 70), red_zone, rng)
        catalog = DEFAULT_CONFIG.routes_for(FieldZone.REDZONE)
        assert all(template in catalog for _, template in routes)

    def test_single_class_catalog_serves_every_receiver(self, route_factory, own_25, rng):
        short = route_factory(depths=(1, 2, 3, 4, 5), name="quick")
        config = DEFAULT_CONFIG.with_overrides(route_catalog={zone: (short,) for zone in FieldZone})
        routes = RouteSelector(config).select(receivers_with_speeds(90, 80, 70), own_25, rng)
        assert [t.name for _, t in routes] == ["quick", "quick", "quick"]

    def test_same_seed_same_routes(self, own_25):
        receivers = receivers_with_speeds(88, 77, 66, 55)
        first = RouteSelector().select(receivers, own_25, random.Random(42))
        second = RouteSelector().select(receivers, own_25, random.Random(42))
        assert [t.name for _, t in first] == [t.name for _, t in second]
