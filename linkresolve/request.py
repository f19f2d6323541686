"""Turning link text found in a document into absolute URLs."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote_to_bytes

from linkresolve import path as _path
from linkresolve.errors import (
    InvalidFileError,
    InvalidPathToUriError,
    InvalidUrlFromPathError,
    LinkError,
)
from linkresolve.url import remove_get_params_and_separate_fragment

MAX_TRUNCATED_STR_LEN = 100

_PATH_SEGMENT_UNSAFE = frozenset(b' "#<>?`{}/%')
_FRAGMENT_UNSAFE = frozenset(b' "<>`')


def _percent_encode(text: str, unsafe: frozenset[int]) -> str:
    encoded = []
    for byte in text.encode("utf-8", "surrogateescape"):
        if byte < 0x20 or byte >= 0x7F or byte in unsafe:
            encoded.append(f"%{byte:02X}")
        else:
            encoded.append(chr(byte))
    return "".join(encoded)


def _file_url(path: Path) -> str:
    if not path.is_absolute():
        raise InvalidUrlFromPathError(path)
    drive = path.drive
    prefix = f"/{drive}" if drive else ""
    segments = (_percent_encode(part, _PATH_SEGMENT_UNSAFE) for part in path.parts[1:])
    return "file://" + prefix + "/" + "/".join(segments)


def is_anchor(text: str) -> bool:
    """Tell whether the link text is a same-document anchor such as ``#top``."""
    return text.startswith("#")


def resolve_and_create_url(
    src_path: str | os.PathLike[str],
    dest_path: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Build a ``file://`` URL for ``dest_path`` as linked from ``src_path``.

    Query parameters are dropped, the fragment is kept, and the path is
    percent-decoded before resolution so it is not encoded twice.

    Raises InvalidPathToUriError when the path cannot be decoded or resolved,
    and InvalidUrlFromPathError when the result is not an absolute path.
    """
    path_part, fragment = remove_get_params_and_separate_fragment(dest_path)
    try:
        decoded = unquote_to_bytes(path_part).decode("utf-8")
    except UnicodeDecodeError as err:
        raise InvalidPathToUriError(path_part) from err

    try:
        resolved = _path.resolve(src_path, decoded, ignore_absolute_local_links)
    except LinkError as err:
        raise InvalidPathToUriError(decoded) from err
    if resolved is None:
        raise InvalidPathToUriError(decoded)

    url = _file_url(resolved)
    if fragment is not None:
        url += "#" + _percent_encode(fragment, _FRAGMENT_UNSAFE)
    return url


def create_uri_from_file_path(
    file_path: str | os.PathLike[str],
    link_text: str,
    ignore_absolute_local_links: bool,
) -> str:
    """Create a file URL for ``link_text`` found in the file ``file_path``.

    Anchors are attached to the name of the file they were found in.

    Raises InvalidFileError when an anchor's file has no name, and
    InvalidPathToUriError when no URL can be built.
    """
    if is_anchor(link_text):
        file_name = Path(file_path).name
        if not file_name:
            raise InvalidFileError(file_path)
        target_path = f"{file_name}{link_text}"
    else:
        target_path = link_text

    try:
        return resolve_and_create_url(file_path, target_path, ignore_absolute_local_links)
    except LinkError as err:
        raise InvalidPathToUriError(target_path) from err


def truncate_source(source: object) -> object:
    """Shorten string sources to at most 100 characters; return others unchanged."""
    if isinstance(source, str):
        return source[:MAX_TRUNCATED_STR_LEN]
    return source


def prepend_root_dir_if_absolute_local_link(
    text: str, root_dir: str | os.PathLike[str] | None
) -> str:
    """Prefix an absolute local link with ``root_dir`` when one is given."""
    if text.startswith("/") and root_dir is not None:
        return f"{os.fspath(root_dir)}{text}"
    return text