"""Checking that a URL's fragment names an anchor in the linked document."""

from __future__ import annotations

import enum
import os
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote_to_bytes

FragmentExtractor = Callable[[str], "set[str] | frozenset[str]"]


class FileType(enum.Enum):
    """Kinds of documents whose fragments can be checked."""

    MARKDOWN = "markdown"
    HTML = "html"
    PLAINTEXT = "plaintext"


@dataclass(frozen=True)
class FragmentInput:
    """The content of a linked document together with its file type."""

    content: str
    file_type: FileType

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], file_type: FileType) -> FragmentInput:
        """Read the document at ``path``. Raises OSError if it cannot be read."""
        return cls(Path(path).read_text(encoding="utf-8"), file_type)


class FragmentChecker:
    """Checks fragments against the anchors of documents, caching per URL.

    ``extractors`` maps each file type to a function returning the set of
    fragments a document defines. Types without an extractor are not checked.
    """

    def __init__(self, extractors: Mapping[FileType, FragmentExtractor]) -> None:
        self._extractors = dict(extractors)
        self._cache: dict[str, set[str] | frozenset[str]] = {}
        self._lock = threading.Lock()

    def check(self, input: FragmentInput, url: str) -> bool:
        """Tell whether the fragment of ``url`` exists in ``input``.

        URLs without a fragment, with an empty one, or with ``top`` always pass,
        as do plain-text documents. Markdown fragments compare case-insensitively.
        """
        url_without_frag, sep, fragment = url.partition("#")
        if not sep or not fragment or fragment.lower() == "top":
            return True
        decoded = unquote_to_bytes(fragment).decode("utf-8")

        extractor = self._extractors.get(input.file_type)
        if input.file_type is FileType.PLAINTEXT or extractor is None:
            return True
        if input.file_type is FileType.MARKDOWN:
            decoded = decoded.lower()

        with self._lock:
            fragments = self._cache.get(url_without_frag)
            if fragments is None:
                fragments = extractor(input.content)
                self._cache[url_without_frag] = fragments
        return fragment in fragments or decoded in fragments