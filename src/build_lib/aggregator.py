"""
Build resolution and stat aggregation.

This module acts as the "Controller" between the parsed catalog and the
render step. It handles:
- Looking up each build index in the catalog.
- Summing EN load and weight over the selected parts.
- Rounding the totals for presentation.
"""

import logging

import src.build_lib.constants as C
from src.build_lib.types import (
    BuildSummary,
    Catalog,
    PartRecord,
    create_empty_summary,
)
from src.build_lib.utils import get_stat

logger = logging.getLogger(__name__)


def _stat(part: PartRecord, column: str) -> float:
    """Absent stats contribute zero."""
    value = get_stat(part, column)
    return value if value is not None else 0.0


def resolve_parts(
    indices: list[int], catalog: Catalog
) -> tuple[list[PartRecord], list[int]]:
    """
    Looks up each index in the catalog.

    Args:
        indices: Build indices, in order. Duplicates are allowed.
        catalog: The parsed catalog.

    Returns:
        A tuple of (selected records in index order, out-of-range indices).
    """
    selected: list[PartRecord] = []
    skipped: list[int] = []

    for index in indices:
        if 0 <= index < len(catalog):
            selected.append(catalog[index])
        else:
            logger.warning(
                f"Build index {index} is out of range (catalog has {len(catalog)} parts)"
            )
            skipped.append(index)

    return selected, skipped


def resolve_and_aggregate(indices: list[int], catalog: Catalog) -> BuildSummary:
    """
    Resolves a build against the catalog and totals its stats.

    Args:
        indices: Build indices from `parse_indices`.
        catalog: Records from `parse_catalog`.

    Returns:
        A BuildSummary with the selected parts, totals rounded to one decimal,
        and whether anything was found.
    """
    summary = create_empty_summary()
    selected, skipped = resolve_parts(indices, catalog)

    en_load = sum(_stat(part, C.EN_LOAD_COLUMN) for part in selected)
    weight = sum(_stat(part, C.WEIGHT_COLUMN) for part in selected)

    summary["parts"] = selected
    summary["skipped"] = skipped
    summary["total_en_load"] = round(en_load, 1)
    summary["total_weight"] = round(weight, 1)
    summary["any_found"] = bool(selected)
    return summary


def describe_part(part: PartRecord) -> str:
    """
    Builds the display label for a part, e.g. "Leg (Light)".

    Args:
        part: A catalog record.

    Returns:
        The name followed by the kind in parentheses.
    """
    name = part.get(C.NAME_COLUMN) or ""
    kind = part.get(C.KIND_COLUMN) or ""
    return f"{name} ({kind})"
