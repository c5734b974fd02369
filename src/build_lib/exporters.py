"""
Download formats for a resolved build.
"""

import csv
import io

import src.build_lib.constants as C
from src.build_lib.types import BuildSummary
from src.build_lib.utils import format_stat, get_stat


def generate_build_csv(summary: BuildSummary) -> bytes:
    """
    Generates a CSV file listing the parts of a build.

    One row per selected part (duplicates included), followed by a
    "Total" row with the summed stats.

    Args:
        summary (BuildSummary): The aggregated build.

    Returns:
        bytes: The CSV content encoded as utf-8-sig.
    """
    csv_buf = io.StringIO()
    fields = ["Slot", "Name", "Kind", "EN Load", "Weight"]

    writer = csv.DictWriter(csv_buf, fieldnames=fields)
    writer.writeheader()

    for slot, part in enumerate(summary["parts"], start=1):
        writer.writerow(
            {
                "Slot": slot,
                "Name": part.get(C.NAME_COLUMN, ""),
                "Kind": part.get(C.KIND_COLUMN, ""),
                "EN Load": format_stat(get_stat(part, C.EN_LOAD_COLUMN)),
                "Weight": format_stat(get_stat(part, C.WEIGHT_COLUMN)),
            }
        )

    writer.writerow(
        {
            "Slot": "Total",
            "Name": "",
            "Kind": "",
            "EN Load": format_stat(summary["total_en_load"]),
            "Weight": format_stat(summary["total_weight"]),
        }
    )

    # encode "utf-8-sig" so Excel opens it correctly with special characters
    return csv_buf.getvalue().encode("utf-8-sig")
