"""Loading source lines and checking the output destination."""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..models.source import SourceFault, SourceFaultKind, SourceLoadResult

logger = logging.getLogger(__name__)

CSV_SUFFIX = ".csv"


def _fault(kind: SourceFaultKind, path: Path, message: str) -> SourceFault:
    return SourceFault(kind=kind, path=str(path), message=message)


def load_source_lines(path: Union[str, Path]) -> SourceLoadResult:
    """
    Read a CSV source into raw text lines.

    Checks run in order: existence, regular file, ``.csv`` extension, then
    readability. The first failing check is reported as the fault.

    Args:
        path: Path to the CSV file

    Returns:
        SourceLoadResult holding either the lines or a SourceFault
    """
    source = Path(path).expanduser()
    absolute = source.absolute()

    if not source.exists():
        return SourceLoadResult(fault=_fault(
            SourceFaultKind.NOT_FOUND, absolute, f"CSV file does not exist: {absolute}"
        ))

    if not source.is_file():
        return SourceLoadResult(fault=_fault(
            SourceFaultKind.NOT_A_FILE, absolute, f"Path is not a regular file: {absolute}"
        ))

    if source.suffix.lower() != CSV_SUFFIX:
        return SourceLoadResult(fault=_fault(
            SourceFaultKind.WRONG_EXTENSION, absolute, f"File does not have a .csv extension: {source.name}"
        ))

    if not os.access(source, os.R_OK):
        return SourceLoadResult(fault=_fault(
            SourceFaultKind.UNREADABLE, absolute, f"Cannot read file: {absolute}"
        ))

    try:
        with open(source, "r", encoding="utf-8-sig") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        return SourceLoadResult(fault=_fault(
            SourceFaultKind.UNREADABLE, absolute, f"Cannot read file: {absolute} ({e})"
        ))

    lines = text.split("\n")
    # Universal newlines already folded \r\n and \r; a final terminator adds no line
    if lines[-1] == "":
        lines.pop()
    lines = tuple(lines)
    logger.debug("Loaded %d lines from %s", len(lines), absolute)
    return SourceLoadResult(lines=lines)


def check_output_dir(path: Union[str, Path]) -> Optional[SourceFault]:
    """
    Check that a report destination can be used as a directory.

    Returns:
        A fault when the path exists but is not a directory, otherwise None
    """
    destination = Path(path).expanduser()
    if destination.exists() and not destination.is_dir():
        absolute = destination.absolute()
        return _fault(
            SourceFaultKind.OUTPUT_NOT_DIRECTORY,
            absolute,
            f"Output path exists and is not a directory: {absolute}",
        )
    return None
