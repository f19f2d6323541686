"""Error types raised while resolving links, and error-message helpers."""

from __future__ import annotations

import os
from pathlib import Path

_CONNECT_MARKER = "error trying to connect:"


class LinkError(Exception):
    """Base class for all link resolution errors."""


class InvalidFileError(LinkError):
    """A file path could not be used to resolve a link."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid file path: {self.path}")


class InvalidPathToUriError(LinkError):
    """A path could not be turned into a URI."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid path to URL conversion: {path}")


class InvalidUrlFromPathError(LinkError):
    """A resolved path could not be expressed as a file URL."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot convert path to URL: {self.path}")


def trim_error_output(text: str) -> str:
    """Keep only the meaningful tail of a verbose connection error message.

    Everything after "error trying to connect:" is returned, stripped of
    surrounding whitespace. Messages without that marker are returned as is.
    """
    _before, marker, after = text.partition(_CONNECT_MARKER)
    if marker:
        return after.strip()
    return text