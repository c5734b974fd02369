"""
Exception taxonomy for the Build Viewer.

Every failure that aborts a display request derives from `BuildViewerError`,
so the top-level handler can catch one type and surface a single message.
Row-level catalog problems are not exceptions; they are logged as warnings.
"""


class BuildViewerError(Exception):
    """Base class for request-aborting failures."""


class InvalidUrlError(BuildViewerError):
    """The page URL could not be parsed."""


class InvalidIndexError(BuildViewerError):
    """A segment of the `build` parameter is not a valid index."""

    def __init__(self, segment: str):
        self.segment = segment
        shown = segment if len(segment) <= 20 else f"{segment[:20]}..."
        super().__init__(f"Invalid part index in build: {shown!r}")


class EmptyInputError(BuildViewerError):
    """The catalog text contained no non-blank lines."""


class NoHeaderError(BuildViewerError):
    """The catalog header row produced no usable column names."""


class NoValidRowsError(BuildViewerError):
    """The catalog had data lines but none of them could be parsed."""


class FetchError(BuildViewerError):
    """The catalog could not be retrieved."""

    def __init__(self, message: str, status: int | None = None):
        self.status = status
        super().__init__(message)
