from pathlib import Path

import pytest

from linkresolve.errors import InvalidFileError, InvalidPathToUriError
from linkresolve.request import (
    create_uri_from_file_path,
    is_anchor,
    prepend_root_dir_if_absolute_local_link,
    resolve_and_create_url,
    truncate_source,
)


def test_is_anchor():
    assert is_anchor("#anchor")
    assert not is_anchor("notan#anchor")


def test_create_uri_from_path():
    result = resolve_and_create_url(Path("/README.md"), "test+encoding", True)
    assert result == "file:///test+encoding"


def test_resolve_drops_query_and_keeps_fragment():
    result = resolve_and_create_url("/some/page.html", "other.html?x=1#sec", False)
    assert result == "file:///some/other.html#sec"


def test_resolve_does_not_double_encode():
    result = resolve_and_create_url("/some/page.html", "a%20b.html", False)
    assert result == "file:///some/a%20b.html"


def test_resolve_ignored_absolute_link_raises():
    with pytest.raises(InvalidPathToUriError):
        resolve_and_create_url("/some/page.html", "/abs.html", True)


def test_resolve_invalid_utf8_raises():
    with pytest.raises(InvalidPathToUriError):
        resolve_and_create_url("/some/page.html", "bad%FF.html", False)


@pytest.mark.parametrize(
    ("link", "expected"),
    [
        ("relative.html", "file:///some/relative.html"),
        ("../parent", "file:///parent"),
        ("#fragment", "file:///some/page.html#fragment"),
    ],
)
def test_create_uri_from_file_path_with_root_dir(link, expected):
    text = prepend_root_dir_if_absolute_local_link(link, Path("/tmp/lychee"))
    assert create_uri_from_file_path(Path("/some/page.html"), text, False) == expected


def test_root_relative_link_from_root_dir():
    text = prepend_root_dir_if_absolute_local_link("/root-relative", Path("/tmp/lychee"))
    result = create_uri_from_file_path(Path("/some/page.html"), text, False)
    assert result == "file:///tmp/lychee/root-relative"


def test_absolute_link_ignored_without_root_dir():
    with pytest.raises(InvalidPathToUriError):
        create_uri_from_file_path(Path("/some/page.html"), "/root-relative", True)


def test_anchor_without_file_name_raises():
    with pytest.raises(InvalidFileError):
        create_uri_from_file_path(Path("/"), "#fragment", False)


def test_truncate_long_string():
    source = "x" * 150
    assert truncate_source(source) == "x" * 100


def test_truncate_short_string_unchanged():
    assert truncate_source("short") == "short"


def test_truncate_non_string_unchanged():
    source = Path("/some/page.html")
    assert truncate_source(source) is source


def test_prepend_with_absolute_local_link_and_root_dir():
    result = prepend_root_dir_if_absolute_local_link("/absolute/path", Path("/root"))
    assert result == "/root/absolute/path"


def test_prepend_with_absolute_local_link_and_no_root_dir():
    result = prepend_root_dir_if_absolute_local_link("/absolute/path", None)
    assert result == "/absolute/path"


def test_prepend_with_relative_link_and_root_dir():
    result = prepend_root_dir_if_absolute_local_link("relative/path", Path("/root"))
    assert result == "relative/path"


def test_prepend_with_relative_link_and_no_root_dir():
    result = prepend_root_dir_if_absolute_local_link("relative/path", None)
    assert result == "relative/path"