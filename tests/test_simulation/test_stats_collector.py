"""Tests for StatsCollector."""

from uuid import uuid4

import pytest

from scrimmage.core.enums import PlayOutcome
from scrimmage.core.models import PlayResult
from scrimmage.events import EventBus
from scrimmage.simulation import (
    PerformanceEventType,
    SimulationEngine,
    StatsCollector,
)


@pytest.fixture
def ids():
    return {name: uuid4() for name in ("qb", "wr", "cb", "de")}


def credited(events):
    return [(e.player_id, e.event_type, e.value) for e in events]


class TestProcessPlay:
    """Tests for per-play crediting."""

    def test_completion_credits_receiver_and_tackler(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(
                outcome=PlayOutcome.COMPLETE,
                yards_gained=14,
                passer_id=ids["qb"],
                receiver_id=ids["wr"],
                tackler_id=ids["cb"],
            )
        )

        assert credited(events) == [
            (ids["wr"], PerformanceEventType.CATCH, 1),
            (ids["wr"], PerformanceEventType.YARDS_GAINED, 14),
            (ids["cb"], PerformanceEventType.TACKLE, 1),
        ]
        qb = collector.get(ids["qb"])
        assert (qb.completions, qb.pass_attempts, qb.passing_yards) == (1, 1, 14)
        assert collector.get(ids["wr"]).receiving_yards == 14
        assert collector.get(ids["cb"]).tackles == 1

    def test_touchdown_credits_no_tackle(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(
                outcome=PlayOutcome.TOUCHDOWN,
                yards_gained=30,
                passer_id=ids["qb"],
                receiver_id=ids["wr"],
                points_scored=7,
            )
        )

        assert (ids["wr"], PerformanceEventType.TOUCHDOWN, 1) in credited(events)
        assert collector.get(ids["qb"]).passing_touchdowns == 1
        assert collector.get(ids["wr"]).touchdowns == 1

    def test_sack(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(outcome=PlayOutcome.SACK, yards_gained=-8, passer_id=ids["qb"], sacker_id=ids["de"])
        )

        assert credited(events) == [(ids["de"], PerformanceEventType.SACK, 1)]
        assert collector.get(ids["qb"]).sack_yards_lost == 8
        assert collector.get(ids["de"]).sacks == 1

    def test_coverage_sack_without_sacker(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(outcome=PlayOutcome.SACK, yards_gained=-5, passer_id=ids["qb"])
        )
        assert events == []
        assert collector.get(ids["qb"]).sacks_taken == 1

    def test_interception(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(
                outcome=PlayOutcome.INTERCEPTION,
                passer_id=ids["qb"],
                receiver_id=ids["wr"],
                interceptor_id=ids["cb"],
                defender_id=ids["cb"],
            )
        )

        assert credited(events) == [(ids["cb"], PerformanceEventType.INTERCEPTION, 1)]
        assert collector.get(ids["qb"]).interceptions_thrown == 1
        assert collector.get(ids["wr"]).targets == 1

    def test_pass_defended(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(
                outcome=PlayOutcome.INCOMPLETE,
                passer_id=ids["qb"],
                receiver_id=ids["wr"],
                defender_id=ids["cb"],
            )
        )

        assert credited(events) == [(ids["cb"], PerformanceEventType.PASS_DEFENDED, 1)]
        assert collector.get(ids["qb"]).completion_pct == 0

    def test_scramble_touchdown(self, ids):
        collector = StatsCollector()
        events = collector.process_play(
            PlayResult(outcome=PlayOutcome.TOUCHDOWN, yards_gained=6, rusher_id=ids["qb"], points_scored=7)
        )

        assert credited(events) == [
            (ids["qb"], PerformanceEventType.YARDS_GAINED, 6),
            (ids["qb"], PerformanceEventType.TOUCHDOWN, 1),
        ]
        qb = collector.get(ids["qb"])
        assert qb.scrambles == 1
        assert qb.pass_attempts == 0

    def test_kicks_and_throwaways_credit_nobody(self, ids):
        collector = StatsCollector()
        assert collector.process_play(PlayResult(outcome=PlayOutcome.PUNT)) == []
        assert collector.process_play(PlayResult(outcome=PlayOutcome.THROWAWAY, passer_id=ids["qb"])) == []
        assert collector.plays_processed == 2

    def test_unknown_player_reads_zero(self):
        stats = StatsCollector().get(uuid4())
        assert stats.pass_attempts == 0
        assert stats.yards_gained == 0


class TestEventBusIntegration:
    """Tests for collecting from a live engine."""

    def test_collects_every_play(self, offense, defense, own_25):
        bus = EventBus()
        collector = StatsCollector(bus)
        engine = SimulationEngine(event_bus=bus)

        drives = [engine.simulate_drive(offense, defense, own_25, seed=s) for s in range(10)]

        assert collector.plays_processed == sum(len(d.plays) for d in drives)
        qb = collector.get(offense.quarterback.id)
        passes = [p for d in drives for p in d.plays if p.outcome.is_pass_attempt and p.receiver_id]
        assert qb.pass_attempts == len(passes)
        assert qb.completions == sum(p.is_completion for p in passes)

    def test_process_drive_matches_bus(self, offense, defense, own_25):
        bus = EventBus()
        live = StatsCollector(bus)
        drive = SimulationEngine(event_bus=bus).simulate_drive(offense, defense, own_25, seed=9)

        offline = StatsCollector()
        offline.process_drive(drive)

        assert offline.get_summary()["players"] == live.get_summary()["players"]
