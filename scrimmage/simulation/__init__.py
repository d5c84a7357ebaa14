"""Play and drive simulation engine."""

from scrimmage.simulation.engine import SimulationEngine, field_goal_probability
from scrimmage.simulation.batch import BatchSummary, simulate_drives
from scrimmage.simulation.stats_collector import (
    ParticipantStats,
    PerformanceEvent,
    PerformanceEventType,
    StatsCollector,
)

__all__ = [
    "BatchSummary",
    "ParticipantStats",
    "PerformanceEvent",
    "PerformanceEventType",
    "SimulationEngine",
    "StatsCollector",
    "field_goal_probability",
    "simulate_drives",
]
