"""Test record parsing and line-level validation."""

import logging
import math
import re
from typing import Iterable, List, Optional, Union

from ..models.test_record import LineValidationError, ParseResult, TestRecord, TestStatus

logger = logging.getLogger(__name__)

WRONG_COLUMN_COUNT = "wrong column count"
INVALID_STATUS = "invalid status"
INVALID_DURATION = "invalid duration"
NEGATIVE_DURATION = "negative duration"
MISSING_ID = "missing id"
MISSING_NAME = "missing name"

EXPECTED_COLUMNS = 4

# Plain ASCII decimal literal, optional sign and exponent. Rejects nan/inf, "1_000" and non-ASCII digits.
_DURATION_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


def parse_duration(text: str) -> Optional[float]:
    """
    Parse a duration in seconds.

    Args:
        text: Trimmed duration text

    Returns:
        The parsed value (possibly negative), or None if text is not a number
    """
    if not _DURATION_PATTERN.match(text):
        return None
    value = float(text)
    # "1e400" overflows to inf
    if not math.isfinite(value):
        return None
    # Adding 0.0 turns "-0" into 0.0
    return value + 0.0


class RecordParser:
    """Turn raw CSV lines into validated test records."""

    def __init__(self, skip_header: bool = False, delimiter: str = ","):
        """
        Initialize record parser.

        Args:
            skip_header: Treat the first non-blank line as a header and discard it
            delimiter: Field separator
        """
        self.skip_header = skip_header
        self.delimiter = delimiter

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """
        Parse and validate lines.

        Every line ends up in exactly one of records, errors or skipped lines.
        A defective line never stops the batch.

        Args:
            lines: Raw text lines, without line terminators

        Returns:
            ParseResult with records and errors in line order
        """
        records: List[TestRecord] = []
        errors: List[LineValidationError] = []
        skipped: List[int] = []
        header_consumed = False

        for line_number, line in enumerate(lines, 1):
            if not line.strip():
                skipped.append(line_number)
                continue

            if self.skip_header and not header_consumed:
                header_consumed = True
                skipped.append(line_number)
                logger.info("Header detected and skipped: %s", line)
                continue

            record_or_error = self._parse_line(line_number, line)
            if isinstance(record_or_error, LineValidationError):
                logger.warning("%s", record_or_error)
                errors.append(record_or_error)
            else:
                records.append(record_or_error)

        logger.debug("Parsed %d records, %d errors, %d skipped lines", len(records), len(errors), len(skipped))
        return ParseResult(records=tuple(records), errors=tuple(errors), skipped_lines=tuple(skipped))

    def _parse_line(self, line_number: int, line: str) -> Union[TestRecord, LineValidationError]:
        """Parse one non-blank data line into a record or an error."""
        fields = line.split(self.delimiter)
        if len(fields) != EXPECTED_COLUMNS:
            return LineValidationError(line_number=line_number, message=WRONG_COLUMN_COUNT, line_text=line)

        test_id, name, status_text, duration_text = (field.strip() for field in fields)

        status = TestStatus.parse(status_text)
        if status is None:
            return LineValidationError(line_number=line_number, message=INVALID_STATUS, line_text=line)

        duration = parse_duration(duration_text)
        if duration is None:
            return LineValidationError(line_number=line_number, message=INVALID_DURATION, line_text=line)
        if duration < 0:
            return LineValidationError(line_number=line_number, message=NEGATIVE_DURATION, line_text=line)

        if not test_id:
            return LineValidationError(line_number=line_number, message=MISSING_ID, line_text=line)
        if not name:
            return LineValidationError(line_number=line_number, message=MISSING_NAME, line_text=line)

        # Screening above covers every record invariant; a failure here is a bug.
        return TestRecord(id=test_id, name=name, status=status, duration=duration)


def parse_records(lines: Iterable[str], skip_header: bool = False) -> ParseResult:
    """Parse lines with the default comma-separated, four-column layout."""
    return RecordParser(skip_header=skip_header).parse(lines)
