"""
Build Viewer Library (Package Entry Point).

Exposes the catalog parser, build link resolver, aggregator and the
fetch-then-render pipeline.
"""

from .aggregator import describe_part, resolve_and_aggregate, resolve_parts
from .display import RenderSink, display_build, render_summary
from .errors import (
    BuildViewerError,
    EmptyInputError,
    FetchError,
    InvalidIndexError,
    InvalidUrlError,
    NoHeaderError,
    NoValidRowsError,
)
from .exporters import generate_build_csv
from .loader import fetch_catalog_text, load_catalog
from .parser import parse_catalog
from .resolver import build_url, parse_index, parse_indices
from .types import (
    BuildSummary,
    Catalog,
    DisplayResult,
    PartRecord,
    create_empty_summary,
)
from .utils import format_stat, get_stat, parse_stat

__all__ = [
    # types
    "PartRecord",
    "Catalog",
    "BuildSummary",
    "DisplayResult",
    "create_empty_summary",
    # errors
    "BuildViewerError",
    "InvalidUrlError",
    "InvalidIndexError",
    "EmptyInputError",
    "NoHeaderError",
    "NoValidRowsError",
    "FetchError",
    # parser
    "parse_catalog",
    # resolver
    "parse_index",
    "parse_indices",
    "build_url",
    # aggregator
    "resolve_parts",
    "resolve_and_aggregate",
    "describe_part",
    # loader
    "fetch_catalog_text",
    "load_catalog",
    # display
    "RenderSink",
    "display_build",
    "render_summary",
    # exporters
    "generate_build_csv",
    # utils
    "format_stat",
    "get_stat",
    "parse_stat",
]
