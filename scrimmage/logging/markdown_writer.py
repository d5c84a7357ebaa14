"""Markdown drive summary writer."""

from datetime import datetime
from pathlib import Path
from typing import Optional

from scrimmage.logging.drive_log import DriveLog
from scrimmage.simulation.batch import BatchSummary


class MarkdownDriveWriter:
    """Generates markdown summaries of simulated drives."""

    # Plays this long (either way) are listed in the condensed play-by-play
    BIG_PLAY_YARDS = 15

    def write_summary(
        self,
        drive_log: DriveLog,
        output_path: Path,
        summary: Optional[BatchSummary] = None,
        title: str = "Drive Simulation",
    ) -> None:
        """
        Write a drive summary to a markdown file.

        Args:
            drive_log: Log of all drive events
            output_path: Path to write markdown file
            summary: Batch numbers to include, if any
            title: Document heading
        """
        with open(output_path, "w") as f:
            f.write(self.generate_summary_string(drive_log, summary, title))

    def generate_summary_string(
        self,
        drive_log: DriveLog,
        summary: Optional[BatchSummary] = None,
        title: str = "Drive Simulation",
    ) -> str:
        """Generate markdown summary as a string."""
        lines = [f"# {title}", ""]
        lines.append(f"**Drives:** {len(drive_log.drives)} | **Points:** {drive_log.total_points}")
        lines.append("")

        # Drive results
        lines.append("## Drives")
        lines.append("")
        lines.append("| # | Start | Result | Plays | Yards | Points |")
        lines.append("|---|-------|--------|:---:|:---:|:---:|")
        for drive in drive_log.drives:
            lines.append(
                f"| {drive.drive_number} | {drive.start} | {drive.outcome} | "
                f"{drive.plays} | {drive.yards} | {drive.points} |"
            )
        lines.append("")

        # Scoring plays
        lines.append("## Scoring Summary")
        lines.append("")
        scoring_plays = drive_log.get_scoring_summary()
        if scoring_plays:
            for play in scoring_plays:
                lines.append(
                    f"- **Drive {play.drive_number}** - {play.scoring_type} "
                    f"({play.description}) [{play.total_points_after}]"
                )
        else:
            lines.append("*No scoring plays*")
        lines.append("")

        if summary is not None:
            lines.append("## Batch Statistics")
            lines.append("")
            lines.append("| Statistic | Value |")
            lines.append("|-----------|:---:|")
            lines.append(f"| Points/Drive | {summary.mean_points:.2f} |")
            lines.append(f"| Scoring Rate | {summary.scoring_rate:.1%} |")
            lines.append(f"| Plays/Drive | {summary.mean_plays:.1f} |")
            lines.append(f"| Yards/Drive | {summary.mean_yards:.1f} |")
            lines.append(f"| Comp % | {summary.completion_rate:.1%} |")
            lines.append(f"| Sack Rate | {summary.sack_rate:.1%} |")
            lines.append(f"| INT Rate | {summary.interception_rate:.1%} |")
            lines.append("")

        # Play-by-play (condensed)
        lines.append("## Play-by-Play")
        lines.append("")
        for drive_number, plays in sorted(drive_log.get_plays_by_drive().items()):
            lines.append(f"### Drive {drive_number}")
            lines.append("")
            for entry in plays:
                if (
                    entry.is_scoring_play
                    or entry.is_turnover
                    or (entry.yards_gained is not None and abs(entry.yards_gained) >= self.BIG_PLAY_YARDS)
                ):
                    lines.append(f"**{entry.field_position}** - {entry.description}")
            lines.append("")

        # Footer
        lines.append("---")
        lines.append(f"*Generated by scrimmage - {datetime.now().strftime('%Y-%m-%d %H:%M')}*")

        return "\n".join(lines)
