"""Data models for the test-run reporter."""

from .test_record import TestStatus, TestRecord, LineValidationError, ParseResult
from .statistics import StatisticsSnapshot
from .source import SourceFaultKind, SourceFault, SourceFaultError, SourceLoadResult

__all__ = [
    "TestStatus",
    "TestRecord",
    "LineValidationError",
    "ParseResult",
    "StatisticsSnapshot",
    "SourceFaultKind",
    "SourceFault",
    "SourceFaultError",
    "SourceLoadResult",
]
