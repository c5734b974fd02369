"""
Catalog retrieval.

This module abstracts where the catalog text comes from (an HTTP URL or a
local file) from the logic used to parse it. Any failure to retrieve the
text is reported as a FetchError.
"""

import logging
import os

import requests

import src.build_lib.constants as C
from src.build_lib.errors import FetchError
from src.build_lib.parser import parse_catalog
from src.build_lib.types import Catalog

logger = logging.getLogger(__name__)


def is_remote(source: str) -> bool:
    """True if the catalog source should be fetched over HTTP."""
    return source.lower().startswith(("http://", "https://"))


def _fetch_remote(url: str, timeout: float) -> str:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Could not reach catalog at {url}: {e}") from e

    if not response.ok:
        raise FetchError(
            f"Catalog request failed with HTTP status {response.status_code}",
            status=response.status_code,
        )

    return response.text


def _read_local(path: str) -> str:
    if not os.path.exists(path):
        raise FetchError(f"Catalog file not found: {path}")

    try:
        # newline="" keeps the CRLF terminators the parser splits on
        with open(path, encoding="utf-8-sig", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FetchError(f"Could not read catalog file {path}: {e}") from e


def fetch_catalog_text(
    source: str = C.DEFAULT_CATALOG_SOURCE, timeout: float = C.FETCH_TIMEOUT
) -> str:
    """
    Retrieves the raw catalog text.

    Args:
        source: An http(s) URL or a local file path.
        timeout: Seconds to wait for the HTTP response (ignored for files).

    Returns:
        The catalog text, line terminators intact.

    Raises:
        FetchError: On a non-success HTTP status, a network error,
                    or a missing/unreadable file.
    """
    logger.debug(f"Fetching catalog from {source}")
    if is_remote(source):
        return _fetch_remote(source, timeout)
    return _read_local(source)


def load_catalog(
    source: str = C.DEFAULT_CATALOG_SOURCE, timeout: float = C.FETCH_TIMEOUT
) -> Catalog:
    """Fetches and parses the catalog in one step. Nothing is cached."""
    return parse_catalog(fetch_catalog_text(source, timeout))
