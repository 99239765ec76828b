"""
Test-run reporter - validate CSV test results and summarize them.

This package reads a CSV of automated test results, validates every line,
aggregates statistics over the valid records and writes text, CSV and log
reports to a directory.
"""

from .core.record_parser import RecordParser, parse_records
from .core.statistics import summarize
from .core.loader import load_source_lines
from .models.test_record import TestStatus, TestRecord, LineValidationError, ParseResult
from .models.statistics import StatisticsSnapshot
from .reports.writer import write_reports

__version__ = "1.0.0"

__all__ = [
    "RecordParser",
    "parse_records",
    "summarize",
    "load_source_lines",
    "TestStatus",
    "TestRecord",
    "LineValidationError",
    "ParseResult",
    "StatisticsSnapshot",
    "write_reports",
]
