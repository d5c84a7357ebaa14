"""Batch drive simulation for balance analysis.

Every drive gets its own random stream seeded from a master seed, so a
batch can be split across workers and still reproduce exactly.
"""

import logging
import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

import numpy as np

from scrimmage.config import DEFAULT_CONFIG, EngineConfig
from scrimmage.core.enums import DriveOutcome, PlayOutcome
from scrimmage.core.models import DefensiveUnit, DriveResult, FieldPosition, OffensiveUnit
from scrimmage.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


def drive_seeds(master_seed: Optional[int], count: int) -> list[int]:
    """Independent per-drive seeds derived from one master seed."""
    seeder = random.Random(master_seed)
    return [seeder.getrandbits(64) for _ in range(count)]


def convert_to_native(obj):
    """Convert numpy types to native Python types for JSON serialization."""
    if isinstance(obj, dict):
        return {k: convert_to_native(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_to_native(v) for v in obj]
    elif isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


@dataclass
class BatchSummary:
    """Aggregate numbers over a batch of drives."""

    drives: int
    mean_points: float
    std_points: float
    scoring_rate: float
    mean_plays: float
    mean_yards: float
    yards_percentiles: dict[int, float] = field(default_factory=dict)
    outcome_rates: dict[str, float] = field(default_factory=dict)
    completion_rate: float = 0.0
    sack_rate: float = 0.0
    interception_rate: float = 0.0

    @classmethod
    def from_drives(cls, drives: Iterable[DriveResult]) -> "BatchSummary":
        drives = list(drives)
        if not drives:
            raise ValueError("cannot summarize an empty batch")

        points = np.array([d.points for d in drives], dtype=float)
        plays = np.array([len(d.plays) for d in drives], dtype=float)
        yards = np.array([d.total_yards for d in drives], dtype=float)

        outcomes = Counter(d.outcome for d in drives)
        play_outcomes = Counter(p.outcome for d in drives for p in d.plays)
        dropbacks = sum(n for outcome, n in play_outcomes.items() if not outcome.is_kick)
        # Scramble touchdowns carry no receiver and are not pass attempts
        passes = [
            p for d in drives for p in d.plays
            if p.outcome.is_pass_attempt and p.receiver_id is not None
        ]
        attempts = len(passes)
        completions = sum(1 for p in passes if p.is_completion)

        return cls(
            drives=len(drives),
            mean_points=float(np.mean(points)),
            std_points=float(np.std(points)),
            scoring_rate=float(np.mean(points > 0)),
            mean_plays=float(np.mean(plays)),
            mean_yards=float(np.mean(yards)),
            yards_percentiles={
                q: float(v) for q, v in zip((10, 50, 90), np.percentile(yards, [10, 50, 90]))
            },
            outcome_rates={o.value: outcomes[o] / len(drives) for o in DriveOutcome},
            completion_rate=completions / attempts if attempts else 0.0,
            sack_rate=play_outcomes[PlayOutcome.SACK] / dropbacks if dropbacks else 0.0,
            interception_rate=(
                play_outcomes[PlayOutcome.INTERCEPTION] / attempts if attempts else 0.0
            ),
        )

    def to_dict(self) -> dict:
        return convert_to_native({
            "drives": self.drives,
            "mean_points": round(self.mean_points, 3),
            "std_points": round(self.std_points, 3),
            "scoring_rate": round(self.scoring_rate, 3),
            "mean_plays": round(self.mean_plays, 2),
            "mean_yards": round(self.mean_yards, 2),
            "yards_percentiles": self.yards_percentiles,
            "outcome_rates": self.outcome_rates,
            "completion_rate": round(self.completion_rate, 3),
            "sack_rate": round(self.sack_rate, 3),
            "interception_rate": round(self.interception_rate, 3),
        })


def simulate_drives(
    offense: OffensiveUnit,
    defense: DefensiveUnit,
    count: int,
    seed: Optional[int] = None,
    start: Optional[FieldPosition] = None,
    config: EngineConfig = DEFAULT_CONFIG,
    engine: Optional[SimulationEngine] = None,
) -> tuple[list[DriveResult], BatchSummary]:
    """
    Run ``count`` drives from the same spot.

    Args:
        offense: Offensive unit
        defense: Defensive unit
        count: Number of drives (>= 1)
        seed: Master seed; None for an unseeded batch
        start: Starting field position (own 25 by default)
        config: Engine configuration, ignored when ``engine`` is given
        engine: Engine to reuse (e.g. one wired to an event bus)

    Returns:
        (drives, summary)
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    engine = engine or SimulationEngine(config)
    start = start or FieldPosition()

    drives = [
        engine.resolve_drive(offense, defense, start, random.Random(drive_seed))
        for drive_seed in drive_seeds(seed, count)
    ]
    summary = BatchSummary.from_drives(drives)
    logger.info(
        f"Simulated {count} drives: {summary.mean_points:.2f} points/drive, "
        f"{summary.scoring_rate:.1%} scoring"
    )
    return drives, summary
