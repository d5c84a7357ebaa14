"""Entry point for the scrimmage package."""

import argparse
import logging
from pathlib import Path


def main(argv=None) -> None:
    """Simulate drives between two sample units and print a summary."""
    parser = argparse.ArgumentParser(
        description="scrimmage - round-based pass play and drive simulator",
        prog="scrimmage",
    )
    parser.add_argument(
        "--drives",
        type=int,
        default=10,
        help="Number of drives to simulate (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Master seed for reproducible runs",
    )
    parser.add_argument(
        "--trait",
        type=str,
        default="balanced",
        choices=["gunslinger", "game_manager", "balanced", "scrambler"],
        help="Quarterback trait (default: balanced)",
    )
    parser.add_argument(
        "--yards-from-goal",
        type=int,
        default=75,
        help="Starting spot in yards from the goal line (default: 75)",
    )
    parser.add_argument(
        "--rating",
        type=int,
        default=70,
        help="Offense rating for every attribute (default: 70)",
    )
    parser.add_argument(
        "--defense-rating",
        type=int,
        default=None,
        help="Defense rating (default: same as --rating)",
    )
    parser.add_argument(
        "--zone",
        action="store_true",
        help="Defense plays zone instead of man",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON file with engine config overrides",
    )
    parser.add_argument(
        "--markdown",
        type=Path,
        default=None,
        help="Write a markdown drive summary to this path",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every drive and play",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from scrimmage.config import DEFAULT_CONFIG, EngineConfig
    from scrimmage.core.enums import CoverageType, QBTrait
    from scrimmage.core.models import FieldPosition
    from scrimmage.events import EventBus
    from scrimmage.generators import build_defense, build_offense
    from scrimmage.logging import DriveLog, MarkdownDriveWriter
    from scrimmage.simulation import SimulationEngine, StatsCollector, simulate_drives

    config = EngineConfig.from_file(args.config) if args.config else DEFAULT_CONFIG
    offense = build_offense(args.rating, trait=QBTrait(args.trait))
    defense = build_defense(
        args.defense_rating if args.defense_rating is not None else args.rating,
        coverage_type=CoverageType.ZONE if args.zone else CoverageType.MAN,
    )

    bus = EventBus()
    drive_log = DriveLog()
    drive_log.connect_to_event_bus(bus)
    stats = StatsCollector(bus)
    engine = SimulationEngine(config, event_bus=bus)

    print("scrimmage - Drive Simulation")
    print("=" * 50)

    start = FieldPosition(yards_from_goal=args.yards_from_goal)
    drives, summary = simulate_drives(
        offense, defense, args.drives, seed=args.seed, start=start, engine=engine
    )

    for number, drive in enumerate(drives, start=1):
        print(f"Drive {number:>3}: {drive.display}")

    print()
    print(f"Points/drive:  {summary.mean_points:.2f} (sd {summary.std_points:.2f})")
    print(f"Scoring rate:  {summary.scoring_rate:.1%}")
    print(f"Completion:    {summary.completion_rate:.1%}")
    print(f"Sack rate:     {summary.sack_rate:.1%}")
    print(f"INT rate:      {summary.interception_rate:.1%}")

    qb_stats = stats.get(offense.quarterback.id)
    print(
        f"QB: {qb_stats.completions}/{qb_stats.pass_attempts}, "
        f"{qb_stats.passing_yards} yards, {qb_stats.passing_touchdowns} TD, "
        f"{qb_stats.interceptions_thrown} INT"
    )

    if args.markdown:
        MarkdownDriveWriter().write_summary(drive_log, args.markdown, summary=summary)
        print(f"Summary written to {args.markdown}")


if __name__ == "__main__":
    main()
