"""Helpers for working with link text that may not be a full URL."""

from __future__ import annotations


def remove_get_params_and_separate_fragment(url: str) -> tuple[str, str | None]:
    """Strip query parameters from a link and split off its fragment.

    Returns the path without its query string and the fragment, or ``None``
    when the link has no ``#``. The link need not have a scheme or host.
    """
    path, sep, fragment = url.partition("#")
    path = path.partition("?")[0]
    return path, (fragment if sep else None)