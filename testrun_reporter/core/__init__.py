"""Core components for the test-run reporter."""

from .record_parser import RecordParser, parse_records
from .statistics import summarize
from .loader import load_source_lines, check_output_dir
from .config import ReporterConfig

__all__ = [
    "RecordParser",
    "parse_records",
    "summarize",
    "load_source_lines",
    "check_output_dir",
    "ReporterConfig",
]
