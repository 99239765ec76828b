"""Summary statistics over validated test records."""

from typing import Dict, Optional, Sequence

from ..models.statistics import StatisticsSnapshot
from ..models.test_record import TestRecord, TestStatus


def summarize(records: Sequence[TestRecord]) -> StatisticsSnapshot:
    """
    Compute summary statistics for a set of records.

    Args:
        records: Validated records in input order

    Returns:
        StatisticsSnapshot with counts and percentages for every status,
        mean and total duration, and the slowest record (first one on ties)
    """
    counts: Dict[TestStatus, int] = {status: 0 for status in TestStatus}
    total_duration = 0.0
    slowest: Optional[TestRecord] = None

    for record in records:
        counts[record.status] += 1
        total_duration += record.duration
        # Strict comparison keeps the earliest record among equal durations
        if slowest is None or record.duration > slowest.duration:
            slowest = record

    total = len(records)
    percentages = {
        status: (count * 100.0 / total if total else 0.0)
        for status, count in counts.items()
    }

    return StatisticsSnapshot(
        total=total,
        counts_by_status=counts,
        percent_by_status=percentages,
        average_duration=total_duration / total if total else 0.0,
        total_duration=total_duration,
        slowest=slowest,
    )
