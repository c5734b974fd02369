"""
Fetch-then-render pipeline.

One call to `display_build` is one request: read the build from the URL,
fetch and parse the catalog, aggregate, and write the result to a render
sink. Every call starts from a clean sink and shares no state with any
other call.

State machine per request: idle -> loading -> success | error.
"""

import logging
from typing import Protocol

import src.build_lib.constants as C
from src.build_lib.aggregator import resolve_and_aggregate
from src.build_lib.errors import BuildViewerError
from src.build_lib.loader import load_catalog
from src.build_lib.resolver import parse_indices
from src.build_lib.types import BuildSummary, DisplayResult, PartRecord

logger = logging.getLogger(__name__)


class RenderSink(Protocol):
    """
    Output boundary for a display request.

    Implementations own the widgets (or terminal) the result is written to:
    one entry per selected part, two totals, an error region and a loading
    indicator.
    """

    def reset(self) -> None: ...

    def set_loading(self, active: bool) -> None: ...

    def add_part(self, part: PartRecord) -> None: ...

    def set_totals(self, en_load: float, weight: float) -> None: ...

    def show_error(self, message: str) -> None: ...


def render_summary(summary: BuildSummary, sink: RenderSink) -> None:
    """
    Writes an aggregated build to the sink.

    Args:
        summary: Output of `resolve_and_aggregate`.
        sink: The render boundary.
    """
    for part in summary["parts"]:
        sink.add_part(part)

    sink.set_totals(summary["total_en_load"], summary["total_weight"])

    if not summary["any_found"]:
        sink.show_error(C.NO_PARTS_MESSAGE)


def display_build(
    url: str,
    sink: RenderSink,
    source: str = C.DEFAULT_CATALOG_SOURCE,
    timeout: float = C.FETCH_TIMEOUT,
) -> DisplayResult:
    """
    Runs one display request from URL to rendered build.

    Any BuildViewerError aborts the rest of the request and is shown as a
    single error message; nothing partial is rendered after it.

    Args:
        url: The page URL carrying the `build` parameter.
        sink: The render boundary.
        source: Catalog URL or file path.
        timeout: HTTP timeout for the catalog fetch.

    Returns:
        A DisplayResult describing how the request ended.
    """
    result: DisplayResult = {
        "state": "idle",
        "indices": None,
        "summary": None,
        "error": None,
    }
    sink.reset()

    try:
        indices = parse_indices(url)
        result["indices"] = indices
        if indices is None:
            return result

        result["state"] = "loading"
        sink.set_loading(True)

        catalog = load_catalog(source, timeout)
        summary = resolve_and_aggregate(indices, catalog)
        result["summary"] = summary

        render_summary(summary, sink)
        if summary["any_found"]:
            result["state"] = "success"
        else:
            result["state"] = "error"
            result["error"] = C.NO_PARTS_MESSAGE

    except BuildViewerError as e:
        logger.error(f"Failed to display build for {url!r}: {e}")
        result["state"] = "error"
        result["error"] = str(e)
        sink.show_error(str(e))

    finally:
        sink.set_loading(False)

    return result
