"""Report rendering and file output."""

from .formatter import format_summary, format_records_csv, format_error_log
from .writer import ReportPaths, write_reports

__all__ = [
    "format_summary",
    "format_records_csv",
    "format_error_log",
    "ReportPaths",
    "write_reports",
]
