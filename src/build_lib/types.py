"""
Type definitions and shared data structures for the Build Viewer.

This module contains the type aliases and TypedDicts passed between the
parser, aggregator and display pipeline.
"""

from typing import Literal, TypedDict

# A catalog row: column name -> trimmed string, or float/None for the
# numeric columns (ENLoad, Weight).
PartRecord = dict[str, str | float | None]

Catalog = list[PartRecord]

DisplayState = Literal["idle", "loading", "success", "error"]


class BuildSummary(TypedDict):
    """
    The resolved parts of a build and their combined stats.

    Attributes:
        parts: Selected records, in the order their indices appeared.
        total_en_load: Sum of ENLoad over `parts`, rounded to one decimal.
        total_weight: Sum of Weight over `parts`, rounded to one decimal.
        any_found: True if at least one index resolved to a record.
        skipped: Indices that fell outside the catalog, in order.
    """

    parts: list[PartRecord]
    total_en_load: float
    total_weight: float
    any_found: bool
    skipped: list[int]


class DisplayResult(TypedDict):
    """
    Outcome of one fetch-then-render request.

    Attributes:
        state: Final state of the request ("idle", "success" or "error").
        indices: The parsed build, or None if the URL carried no build.
        summary: The aggregated build, or None if the request did not get that far.
        error: The user-visible error message, if any.
    """

    state: DisplayState
    indices: list[int] | None
    summary: BuildSummary | None
    error: str | None


def create_empty_summary() -> BuildSummary:
    """Factory function to return a summary with nothing selected."""
    return {
        "parts": [],
        "total_en_load": 0.0,
        "total_weight": 0.0,
        "any_found": False,
        "skipped": [],
    }
