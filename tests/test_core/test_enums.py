"""Tests for engine enumerations and exceptions."""

import pytest

from scrimmage.core.enums import (
    DriveOutcome,
    FieldZone,
    PlayOutcome,
    Position,
    RouteDepthClass,
)
from scrimmage.core.errors import (
    EmptyRosterError,
    ExhaustedRoundsWithoutResolution,
    InvalidWeightTable,
    ScrimmageError,
)


class TestPlayOutcome:
    def test_kicks(self):
        kicks = {o for o in PlayOutcome if o.is_kick}
        assert kicks == {PlayOutcome.FIELD_GOAL_GOOD, PlayOutcome.FIELD_GOAL_MISSED, PlayOutcome.PUNT}

    def test_only_interception_is_turnover(self):
        assert [o for o in PlayOutcome if o.is_turnover] == [PlayOutcome.INTERCEPTION]

    def test_pass_attempts_exclude_throwaway_and_scramble(self):
        assert not PlayOutcome.THROWAWAY.is_pass_attempt
        assert not PlayOutcome.SCRAMBLE.is_pass_attempt
        assert not PlayOutcome.SACK.is_pass_attempt
        assert PlayOutcome.TOUCHDOWN.is_pass_attempt


class TestDriveOutcome:
    @pytest.mark.parametrize("outcome,points", [
        (DriveOutcome.TOUCHDOWN, 7),
        (DriveOutcome.FIELD_GOAL, 3),
        (DriveOutcome.MISSED_FG, 0),
        (DriveOutcome.PUNT, 0),
        (DriveOutcome.TURNOVER, 0),
    ])
    def test_points(self, outcome, points):
        assert outcome.points == points


class TestFieldZone:
    @pytest.mark.parametrize("yards,zone", [
        (1, FieldZone.GOALLINE),
        (8, FieldZone.GOALLINE),
        (9, FieldZone.REDZONE),
        (20, FieldZone.REDZONE),
        (21, FieldZone.STANDARD),
        (99, FieldZone.STANDARD),
    ])
    def test_boundaries(self, yards, zone):
        assert FieldZone.from_yards_from_goal(yards) == zone


class TestRouteDepthClass:
    @pytest.mark.parametrize("depth,depth_class", [
        (0, RouteDepthClass.SHORT),
        (5.9, RouteDepthClass.SHORT),
        (6, RouteDepthClass.MEDIUM),
        (15, RouteDepthClass.MEDIUM),
        (15.5, RouteDepthClass.DEEP),
    ])
    def test_boundaries(self, depth, depth_class):
        assert RouteDepthClass.from_max_depth(depth) == depth_class


class TestPosition:
    def test_safeties(self):
        assert [p for p in Position if p.is_safety] == [Position.FS, Position.SS]


class TestErrors:
    def test_hierarchy(self):
        assert issubclass(InvalidWeightTable, ValueError)
        for error in (InvalidWeightTable, EmptyRosterError, ExhaustedRoundsWithoutResolution):
            assert issubclass(error, ScrimmageError)

    def test_empty_roster_names_group(self):
        error = EmptyRosterError("receivers")
        assert error.group == "receivers"
        assert "receivers" in str(error)

    def test_exhausted_rounds(self):
        error = ExhaustedRoundsWithoutResolution(5)
        assert error.rounds == 5
        assert "5 rounds" in str(error)
