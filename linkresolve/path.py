"""Resolution of local file links relative to the file that contains them."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from linkresolve.errors import InvalidFileError


@lru_cache(maxsize=1)
def _current_dir() -> Path:
    return Path.cwd()


@lru_cache(maxsize=None)
def _clean_absolute(path: Path) -> Path:
    base = path if path.is_absolute() else _current_dir() / path
    return Path(os.path.normpath(base))


def absolute_path(path: str | os.PathLike[str]) -> Path:
    """Return ``path`` made absolute against the working directory and cleaned.

    Cleaning is purely lexical: ``.`` components are dropped and ``..``
    components remove their parent, without touching the file system.
    """
    return _clean_absolute(Path(path))


def _has_no_parent(src: str | os.PathLike[str]) -> bool:
    if os.fspath(src) == "":
        return True
    src_path = Path(src)
    return bool(src_path.anchor) and src_path == Path(src_path.anchor)


def resolve(
    src: str | os.PathLike[str],
    dst: str | os.PathLike[str],
    ignore_absolute_local_links: bool,
) -> Path | None:
    """Resolve ``dst``, linked to from within the file ``src``.

    Relative links are looked up in the directory of ``src``. Absolute links
    yield ``None`` when ``ignore_absolute_local_links`` is set.

    Raises InvalidFileError when ``src`` has no parent directory.
    """
    dst_path = Path(dst)
    if dst_path.is_absolute():
        if ignore_absolute_local_links:
            return None
        resolved = dst_path
    else:
        if _has_no_parent(src):
            raise InvalidFileError(dst_path)
        resolved = Path(src).parent / dst_path
    return absolute_path(resolved)


def contains(
    parent: str | os.PathLike[str], child: str | os.PathLike[str]
) -> bool:
    """Tell whether ``child`` lies inside ``parent`` (or is ``parent`` itself).

    Both paths must exist; they are canonicalized before comparison.

    Raises FileNotFoundError when either path does not exist.
    """
    parent_real = Path(parent).resolve(strict=True)
    child_real = Path(child).resolve(strict=True)
    return child_real == parent_real or parent_real in child_real.parents