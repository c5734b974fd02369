"""
Catalog parsing logic.

This module turns the raw comma-delimited catalog into an ordered list of
part records. It handles the optional row-number column, per-row column
count checks and numeric conversion of the stat columns.

Fatal problems (no lines, no header, nothing usable) raise; row-level
problems are logged and the row or field is dropped.
"""

import logging

import src.build_lib.constants as C
from src.build_lib.errors import EmptyInputError, NoHeaderError, NoValidRowsError
from src.build_lib.types import Catalog, PartRecord
from src.build_lib.utils import parse_stat, split_fields

# Initialize Logger
logger = logging.getLogger(__name__)


def parse_header(line: str) -> tuple[list[str], int]:
    """
    Extracts the column names from the header line.

    Args:
        line: The first non-blank catalog line.

    Returns:
        A tuple of (column names without the row-number column, value offset).
        The offset is 1 when the header starts with the row-number column,
        meaning the first value of every data row must be skipped.
    """
    fields = split_fields(line)
    headers = [h for h in fields if h != C.ROW_NUMBER_COLUMN]
    offset = 1 if fields[0] == C.ROW_NUMBER_COLUMN else 0
    return headers, offset


def parse_row(
    line: str, headers: list[str], offset: int, line_no: int
) -> PartRecord | None:
    """
    Maps one data line onto the header columns.

    Args:
        line: The raw data line.
        headers: Column names from `parse_header`.
        offset: Number of leading values to skip.
        line_no: Position of the row among non-blank lines (for log messages).

    Returns:
        The parsed record, or None if the line has too few values.
    """
    values = split_fields(line)[offset:]

    if len(values) < len(headers):
        logger.warning(
            f"Skipping catalog row {line_no}: expected {len(headers)} values, "
            f"got {len(values)}"
        )
        return None

    part: PartRecord = {}
    for header, raw in zip(headers, values):
        if header in C.NUMERIC_COLUMNS:
            value = parse_stat(raw)
            if value is None and raw:
                logger.warning(
                    f"Catalog row {line_no}: {header} value {raw!r} is not a number"
                )
            part[header] = value
        else:
            part[header] = raw

    return part


def parse_catalog(text: str) -> Catalog:
    """
    Parses the delimited catalog text into part records.

    Lines are CRLF-terminated; blank lines are ignored. The first line is the
    header, optionally led by a "No." row-number column.

    Args:
        text: The full catalog text.

    Returns:
        The part records in their original line order.

    Raises:
        EmptyInputError: If the text has no non-blank lines.
        NoHeaderError: If the header yields no column names.
        NoValidRowsError: If data lines exist but none could be parsed.
    """
    lines = [line for line in text.split(C.LINE_TERMINATOR) if line.strip()]
    if not lines:
        raise EmptyInputError("Catalog is empty.")

    headers, offset = parse_header(lines[0])
    if not headers:
        raise NoHeaderError("Catalog header has no columns.")

    parts: Catalog = []
    data_lines = lines[1:]

    for line_no, line in enumerate(data_lines, start=2):
        part = parse_row(line, headers, offset, line_no)
        if part is not None:
            parts.append(part)

    if data_lines and not parts:
        raise NoValidRowsError(
            f"None of the {len(data_lines)} catalog rows could be parsed."
        )

    logger.debug(f"Parsed {len(parts)} parts from {len(data_lines)} catalog rows")
    return parts
