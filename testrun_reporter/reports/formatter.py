"""Text renderings of records, statistics and diagnostics."""

import csv
import io
from typing import List, Sequence

from ..models.statistics import StatisticsSnapshot
from ..models.test_record import LineValidationError, TestRecord, TestStatus

RECORDS_CSV_HEADER = ["id", "name", "status", "duration"]


def format_duration(seconds: float) -> str:
    """Render a duration with three decimals."""
    return f"{seconds:.3f}"


def format_summary(snapshot: StatisticsSnapshot) -> str:
    """
    Format statistics as the human-readable summary.

    Args:
        snapshot: Statistics to render

    Returns:
        Summary text, one fact per line, newline terminated
    """
    lines: List[str] = [f"Total tests: {snapshot.total}"]

    for status in TestStatus:
        lines.append(f"{status}: {snapshot.count(status)} ({snapshot.percent(status):.2f}%)")

    lines.append(f"Average duration: {format_duration(snapshot.average_duration)}")
    lines.append(f"Total duration: {format_duration(snapshot.total_duration)}")

    if snapshot.slowest is not None:
        lines.append(f"Slowest: {snapshot.slowest}")

    return "\n".join(lines) + "\n"


def format_records_csv(records: Sequence[TestRecord]) -> str:
    """Format records as a CSV table with a header row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(RECORDS_CSV_HEADER)
    for record in records:
        writer.writerow([record.id, record.name, record.status.value, format_duration(record.duration)])
    return buffer.getvalue()


def format_error_log(errors: Sequence[LineValidationError]) -> str:
    """Format diagnostics one per line."""
    return "".join(f"{error}\n" for error in errors)
