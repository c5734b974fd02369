"""
Utility functions for numeric parsing and display formatting.

This module handles the low-level conversions used by the parser and the
render step:
- Stat parsing ('10' -> 10.0, '' -> None).
- Stat formatting (10.0 -> '10.0', None -> 'N/A').
- Field splitting for delimited lines.
"""

import math

from src.build_lib import constants as C


def split_fields(line: str) -> list[str]:
    """
    Splits a delimited line and trims every field.

    Args:
        line: A raw catalog line (e.g., " 1, Leg ,Light").

    Returns:
        The trimmed fields (e.g., ['1', 'Leg', 'Light']).
    """
    return [field.strip() for field in line.split(C.FIELD_DELIMITER)]


def parse_stat(raw: str) -> float | None:
    """
    Converts a numeric catalog cell to a float.

    Blank cells and anything that is not a finite number map to None.
    A literal zero is kept as 0.0.

    Args:
        raw: The trimmed cell text (e.g., "10.5").

    Returns:
        The float value, or None if the cell is blank or unparsable.
    """
    # float() also accepts digit grouping ("1_000"); catalog cells never use it
    if not raw or "_" in raw:
        return None

    try:
        value = float(raw)
    except ValueError:
        return None

    # float() accepts 'nan' and 'inf'; neither is a usable stat
    if not math.isfinite(value):
        return None

    return value


def format_stat(value: float | None) -> str:
    """
    Formats a stat for display with one decimal place.

    Args:
        value: The stat value, or None if absent.

    Returns:
        A string like '10.0', or 'N/A' if the value is absent.
    """
    if value is None:
        return C.MISSING_STAT
    return f"{value:.1f}"


def get_stat(part: dict, column: str) -> float | None:
    """Reads a numeric column from a part record; anything but a float is absent."""
    value = part.get(column)
    if isinstance(value, float):
        return value
    return None
