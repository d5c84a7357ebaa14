"""Tests for weighted rolls and threshold tables."""

import random

import pytest

from scrimmage.core.attributes import AttributeSet
from scrimmage.core.errors import InvalidWeightTable
from scrimmage.simulation.resolvers.clash import (
    ThresholdTable,
    chance,
    clamp,
    percent_chance,
    weighted_roll,
    weighted_total,
)

TACKLE = {"tackling": 0.4, "pursuit": 0.3, "hit_power": 0.3}


class TestWeightedRoll:
    """Tests for weighted_roll()."""

    def test_midpoint_draw_is_the_weighted_total(self, scripted):
        attrs = AttributeSet.uniform(70)
        assert weighted_roll(attrs, TACKLE, scripted([0.5])) == pytest.approx(70)

    def test_extremes_follow_variance(self, scripted):
        attrs = AttributeSet.uniform(70)
        assert weighted_roll(attrs, TACKLE, scripted([0.0]), variance=0.2) == pytest.approx(56)
        assert weighted_roll(attrs, TACKLE, scripted([0.0]), variance=0.1) == pytest.approx(63)

    def test_consumes_one_draw(self, scripted):
        rng = scripted([0.3, 0.7])
        weighted_roll(AttributeSet.uniform(60), TACKLE, rng)
        assert rng.calls == 1
        assert rng.script == [0.7]

    def test_stays_inside_variance_band(self):
        """Rolls never leave total * (1 +/- variance)."""
        rng = random.Random(7)
        attrs = AttributeSet({"tackling": 90, "pursuit": 40, "hit_power": 65})
        total = weighted_total(attrs, TACKLE)
        for _ in range(1000):
            roll = weighted_roll(attrs, TACKLE, rng, variance=0.2)
            assert total * 0.8 <= roll <= total * 1.2

    def test_missing_skills_read_as_default(self):
        attrs = AttributeSet({"tackling": 100})
        assert weighted_total(attrs, TACKLE) == pytest.approx(40 + 0.6 * 50)

    def test_empty_table_raises(self):
        with pytest.raises(InvalidWeightTable):
            weighted_total(AttributeSet.uniform(70), {})

    def test_table_with_no_known_skill_raises(self):
        with pytest.raises(InvalidWeightTable):
            weighted_total(AttributeSet({"speed": 70}), {"kick_power": 1.0})


class TestThresholdTable:
    """Tests for ThresholdTable lookups."""

    def test_strict_comparisons(self):
        table = ThresholdTable([(0, "small"), (20, "big")], floor="none")
        assert table.lookup(25) == "big"
        assert table.lookup(20) == "small"
        assert table.lookup(0) == "none"

    def test_inclusive_comparisons(self):
        table = ThresholdTable([(0, "small"), (20, "big")], floor="none", inclusive=True)
        assert table.lookup(20) == "big"
        assert table.lookup(0) == "small"
        assert table.lookup(-0.1) == "none"

    def test_length_counts_floor(self):
        assert len(ThresholdTable([(1, "a"), (2, "b")], floor="c")) == 3


class TestDraws:
    """Tests for the Bernoulli helpers."""

    def test_chance(self, scripted):
        assert chance(scripted([0.24]), 0.25)
        assert not chance(scripted([0.25]), 0.25)

    def test_percent_chance(self, scripted):
        assert percent_chance(scripted([0.339]), 34)
        assert not percent_chance(scripted([0.35]), 34)

    def test_clamp(self):
        assert clamp(120, 0, 100) == 100
        assert clamp(-3, 0, 100) == 0
        assert clamp(42, 0, 100) == 42
