"""
Build link handling.

A build is stored in the page URL as `?build=0-12-7`: hyphen-separated,
zero-based indices into the catalog. This module reads that parameter back
into a list of indices and writes a list of indices into a link.
"""

import logging
import re
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

import src.build_lib.constants as C
from src.build_lib.errors import InvalidIndexError, InvalidUrlError

logger = logging.getLogger(__name__)

# ASCII digits only; \d would also match other scripts' digits
_INDEX_PATTERN = re.compile(r"[0-9]+")


def _split_url(url: str):
    try:
        parts = urlsplit(url)
        # Port is validated lazily by urllib
        parts.port
    except (TypeError, ValueError, AttributeError) as e:
        raise InvalidUrlError(f"Could not parse URL {url!r}: {e}") from e
    return parts


def _extract_query(url: str) -> str:
    """Returns the query string of a full URL or of a bare `build=...` string."""
    parts = _split_url(url)
    if parts.query:
        return parts.query

    # Bare query strings ("build=1-2") have no scheme or host
    if not parts.scheme and not parts.netloc and "=" in parts.path:
        return parts.path.lstrip("?")

    return ""


def parse_index(segment: str) -> int:
    """
    Converts one segment of the build parameter to an index.

    Only base-10 non-negative integers written in ASCII digits are accepted;
    fractions, signs, blanks and numbers too long to convert are rejected.

    Args:
        segment: A single hyphen-separated piece (e.g., "12").

    Returns:
        The integer index.

    Raises:
        InvalidIndexError: If the segment is not an integer.
    """
    cleaned = segment.strip()
    if not _INDEX_PATTERN.fullmatch(cleaned):
        raise InvalidIndexError(segment)

    try:
        return int(cleaned.lstrip("0") or "0")
    except ValueError as e:
        # Past the interpreter's int-string conversion limit
        raise InvalidIndexError(segment) from e


def parse_indices(url: str) -> list[int] | None:
    """
    Reads the build selection from a page URL.

    Args:
        url: The page URL (e.g., "https://example.com/view?build=0-3-3").
             A bare query string ("build=0-3-3") is also accepted.

    Returns:
        The indices in order, or None if the URL carries no build parameter.

    Raises:
        InvalidUrlError: If the URL is malformed.
        InvalidIndexError: If any segment is not an integer.
    """
    query = _extract_query(url)
    params = parse_qs(query, keep_blank_values=True)

    values = params.get(C.BUILD_PARAM)
    if not values or not values[0]:
        return None

    indices = [parse_index(seg) for seg in values[0].split(C.INDEX_SEPARATOR)]
    logger.debug(f"Parsed build {indices} from {url!r}")
    return indices


def build_url(base_url: str, indices: list[int]) -> str:
    """
    Encodes a build selection into a shareable link.

    Existing query parameters on `base_url` are kept; any previous build
    parameter is replaced.

    Args:
        base_url: The page URL to attach the build to.
        indices: Catalog indices, in display order.

    Returns:
        The URL with `?build=...` set.
    """
    parts = _split_url(base_url)
    params = parse_qs(parts.query, keep_blank_values=True)
    params[C.BUILD_PARAM] = [C.INDEX_SEPARATOR.join(str(i) for i in indices)]
    query = urlencode(params, doseq=True, safe=C.INDEX_SEPARATOR)
    return urlunsplit(parts._replace(query=query))
