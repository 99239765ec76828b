"""Write report files to an output directory."""

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict  # type: ignore

from ..core.config import ReporterConfig
from ..core.loader import check_output_dir
from ..core.statistics import summarize
from ..models.source import SourceFaultError
from ..models.statistics import StatisticsSnapshot
from ..models.test_record import LineValidationError, TestRecord
from .formatter import format_error_log, format_records_csv, format_summary

logger = logging.getLogger(__name__)


class ReportPaths(BaseModel):
    """Locations of the files produced by one report run."""

    model_config = ConfigDict(frozen=True)

    directory: Path
    summary: Path
    records: Path
    errors: Path


def write_reports(records: Sequence[TestRecord],
                  errors: Sequence[LineValidationError],
                  out_dir: Union[str, Path],
                  snapshot: Optional[StatisticsSnapshot] = None,
                  config: Optional[ReporterConfig] = None) -> ReportPaths:
    """
    Write the summary, record table and error log.

    The directory and its parents are created when missing.

    Args:
        records: Validated records
        errors: Line validation diagnostics
        out_dir: Destination directory
        snapshot: Precomputed statistics, computed from records when omitted
        config: Supplies the output file names

    Returns:
        ReportPaths for the written files

    Raises:
        SourceFaultError: If out_dir exists and is not a directory
    """
    config = config or ReporterConfig()
    fault = check_output_dir(out_dir)
    if fault is not None:
        raise SourceFaultError(fault)

    directory = Path(out_dir).expanduser()
    directory.mkdir(parents=True, exist_ok=True)

    if snapshot is None:
        snapshot = summarize(records)

    paths = ReportPaths(
        directory=directory,
        summary=directory / config.summary_filename,
        records=directory / config.records_filename,
        errors=directory / config.errors_filename,
    )

    _write_text(paths.summary, format_summary(snapshot))
    logger.info("Summary saved to %s", paths.summary.absolute())

    _write_text(paths.records, format_records_csv(records))
    logger.info("Record table saved to %s", paths.records.absolute())

    _write_text(paths.errors, format_error_log(errors))
    logger.info("Error log saved to %s", paths.errors.absolute())

    return paths


def _write_text(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
