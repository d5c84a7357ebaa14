"""Tests for yards after catch."""

import random

import pytest

from scrimmage.core.enums import Position
from scrimmage.core.models import DefensiveUnit, OffensiveUnit
from scrimmage.generators import build_player
from scrimmage.simulation.matchups import build_matchup
from scrimmage.simulation.resolvers.yac import (
    YACResolver,
    safety_bonus,
    segment_yards,
    tackle_succeeds,
)


def yac_matchup(carrier, coverage):
    offense = OffensiveUnit(quarterback=build_player(Position.QB), receivers=[carrier])
    return build_matchup(offense, DefensiveUnit(coverage=list(coverage)))


class TestHelpers:
    """Tests for tackle and segment helpers."""

    def test_tackle_margin_boundary(self):
        """The tackler only misses when beaten by more than 12."""
        assert tackle_succeeds(-12)
        assert not tackle_succeeds(-12.01)
        assert tackle_succeeds(5)

    def test_segment_yards_clamped(self):
        assert segment_yards(70) == pytest.approx(9)
        assert segment_yards(-50) == 2
        assert segment_yards(250) == 12

    def test_safety_bonus_escalates(self):
        assert [safety_bonus(a) for a in range(3)] == [10, 15, 20]


class TestYACResolver:
    """Tests for YACResolver.resolve()."""

    def test_open_field(self, receiver, make_receiver_state, scripted):
        """Nobody to chase: three full segments on top of the catch depth."""
        matchup = yac_matchup(receiver, [])
        state = make_receiver_state(receiver.id, current_depth=10, separation_margin=30)

        result = YACResolver().resolve(state, matchup, 75, scripted([0.5, 0.5, 0.5]))

        assert result.yards_gained == 37
        assert result.air_yards == 10
        assert result.yards_after_catch == 27
        assert not result.touchdown
        assert result.tackler_id is None
        assert len(result.segments) == 3

    def test_touchdown_capped_at_goal_line(self, receiver, make_receiver_state, scripted):
        matchup = yac_matchup(receiver, [])
        state = make_receiver_state(receiver.id, current_depth=10, separation_margin=30)

        result = YACResolver().resolve(state, matchup, 20, scripted([0.5, 0.5, 0.5]))

        assert result.touchdown
        assert result.yards_gained == 20
        assert result.tackler_id is None

    def test_catch_point_tackle(self, receiver, cornerback, make_receiver_state, scripted):
        matchup = yac_matchup(receiver, [cornerback])
        state = make_receiver_state(
            receiver.id,
            current_depth=10,
            separation_margin=5,
            covered_by=(cornerback.id,),
            primary_defender_id=cornerback.id,
        )
        rng = scripted([0.5, 0.5])

        result = YACResolver().resolve(state, matchup, 75, rng)

        assert result.catch_point_tackle
        assert result.yards_gained == 10
        assert result.tackler_id == cornerback.id
        assert result.segments == ()
        assert rng.calls == 2

    def test_catch_point_at_goal_line_scores(self, receiver, cornerback, make_receiver_state, scripted):
        matchup = yac_matchup(receiver, [cornerback])
        state = make_receiver_state(
            receiver.id,
            current_depth=8,
            separation_margin=0,
            covered_by=(cornerback.id,),
            primary_defender_id=cornerback.id,
        )

        result = YACResolver().resolve(state, matchup, 6, scripted([0.5, 0.5]))

        assert result.touchdown
        assert result.yards_gained == 6

    def test_tackled_in_first_segment(self, cornerback, make_receiver_state, scripted):
        """Half of the segment counts when the first pursuer makes the stop."""
        carrier = build_player(Position.WR, 80)
        matchup = yac_matchup(carrier, [cornerback])
        state = make_receiver_state(
            carrier.id,
            current_depth=10,
            separation_margin=15,
            covered_by=(cornerback.id,),
            primary_defender_id=cornerback.id,
        )

        result = YACResolver().resolve(state, matchup, 75, scripted([0.5, 0.5, 0.5]))

        assert result.yards_gained == 15
        assert result.tackler_id == cornerback.id
        assert result.segments[0].tackled
        assert not result.catch_point_tackle

    def test_broken_tackle_then_open_field(self, cornerback, make_receiver_state, scripted):
        carrier = build_player(Position.WR, 70, speed=100, agility=100, balance=100)
        matchup = yac_matchup(carrier, [cornerback])
        state = make_receiver_state(
            carrier.id,
            current_depth=10,
            separation_margin=15,
            covered_by=(cornerback.id,),
            primary_defender_id=cornerback.id,
        )

        result = YACResolver().resolve(state, matchup, 75, scripted([0.5] * 5))

        assert result.yards_gained == 44
        assert result.tackler_id is None
        assert result.segments[0].tackler_id == cornerback.id
        assert not result.segments[0].tackled

    def test_safety_closes_with_bonus(self, make_receiver_state, scripted):
        """A carrier who would slip a corner gets caught by a safety."""
        carrier = build_player(Position.WR, 70, speed=90, agility=90, balance=90)
        safety = build_player(Position.FS, 70, name="Safety")
        matchup = yac_matchup(carrier, [safety])
        state = make_receiver_state(
            carrier.id,
            current_depth=10,
            separation_margin=15,
            covered_by=(safety.id,),
            primary_defender_id=safety.id,
        )

        result = YACResolver().resolve(state, matchup, 75, scripted([0.5, 0.5, 0.5]))

        assert result.tackler_id == safety.id
        assert result.yards_gained == 15


class TestPursuers:
    """Tests for pursuit order."""

    def test_order(self, receiver, make_receiver_state):
        slow = build_player(Position.CB, 70, name="Slow", pursuit=50)
        fast = build_player(Position.SS, 70, name="Fast", pursuit=95)
        cover = build_player(Position.CB, 70, name="Cover")
        help_ = build_player(Position.FS, 70, name="Help")
        matchup = yac_matchup(receiver, [slow, cover, fast, help_])
        state = make_receiver_state(
            receiver.id, covered_by=(help_.id, cover.id), primary_defender_id=cover.id
        )

        order = YACResolver().pursuers(state, matchup)

        assert [p.id for p in order] == [cover.id, help_.id, fast.id, slow.id]

    def test_yards_never_below_catch_depth(self, receiver, cornerback, make_receiver_state):
        matchup = yac_matchup(receiver, [cornerback])
        state = make_receiver_state(
            receiver.id,
            current_depth=12,
            separation_margin=15,
            covered_by=(cornerback.id,),
            primary_defender_id=cornerback.id,
        )
        rng = random.Random(11)
        for _ in range(300):
            result = YACResolver().resolve(state, matchup, 75, rng)
            assert 12 <= result.yards_gained <= 12 + 36
