"""Drive logging and output."""

from scrimmage.logging.drive_log import DriveLog
from scrimmage.logging.markdown_writer import MarkdownDriveWriter

__all__ = ["DriveLog", "MarkdownDriveWriter"]
