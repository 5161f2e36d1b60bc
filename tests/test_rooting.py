"""Tests for path rooting helpers."""

from __future__ import annotations

import pytest

from findmatch.errors import InvalidArgumentError
from findmatch.platforms import POSIX, WINDOWS
from findmatch.rooting import ensure_rooted, is_rooted, normalize_separators


def test_normalize_separators_posix():
    assert normalize_separators("a//b///c", POSIX) == "a/b/c"
    assert normalize_separators("//a", POSIX) == "/a"
    assert normalize_separators(None, POSIX) == ""


def test_normalize_separators_windows():
    assert normalize_separators("a/b//c", WINDOWS) == "a\\b\\c"
    assert normalize_separators("C:/a\\\\b", WINDOWS) == "C:\\a\\b"


def test_normalize_separators_windows_keeps_unc_prefix():
    assert normalize_separators("\\\\server\\share", WINDOWS) == "\\\\server\\share"
    assert normalize_separators("//server//share", WINDOWS) == "\\\\server\\share"
    assert normalize_separators("\\\\\\server", WINDOWS) == "\\\\server"


@pytest.mark.parametrize(
    "path, expected",
    [
        ("/", True),
        ("/a/b", True),
        ("//a", True),
        ("a/b", False),
        ("*.txt", False),
        ("C:/a", False),
    ],
)
def test_is_rooted_posix(path: str, expected: bool):
    assert is_rooted(path, POSIX) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("C:", True),
        ("c:\\a", True),
        ("C:/a", True),
        ("C:a", True),
        ("\\", True),
        ("\\a", True),
        ("/a", True),
        ("\\\\server\\share", True),
        ("a\\b", False),
        ("*.txt", False),
    ],
)
def test_is_rooted_windows(path: str, expected: bool):
    assert is_rooted(path, WINDOWS) is expected


def test_is_rooted_rejects_empty():
    with pytest.raises(InvalidArgumentError):
        is_rooted("", POSIX)
    with pytest.raises(ValueError):
        is_rooted(None, POSIX)


def test_ensure_rooted_posix():
    assert ensure_rooted("/a/b", "*.txt", POSIX) == "/a/b/*.txt"
    assert ensure_rooted("/a/b/", "*.txt", POSIX) == "/a/b/*.txt"
    assert ensure_rooted("/", "x", POSIX) == "/x"
    assert ensure_rooted("rel", "x/y", POSIX) == "rel/x/y"


def test_ensure_rooted_keeps_rooted_path():
    assert ensure_rooted("/a/b", "/x/*.txt", POSIX) == "/x/*.txt"
    assert ensure_rooted("C:\\a", "D:\\x", WINDOWS) == "D:\\x"


def test_ensure_rooted_windows():
    assert ensure_rooted("C:\\a", "foo", WINDOWS) == "C:\\a\\foo"
    assert ensure_rooted("C:\\a\\", "foo", WINDOWS) == "C:\\a\\foo"
    assert ensure_rooted("C:/a/", "foo", WINDOWS) == "C:/a/foo"


def test_ensure_rooted_bare_drive_is_drive_relative():
    assert ensure_rooted("C:", "foo", WINDOWS) == "C:foo"
    assert ensure_rooted("d:", "foo\\bar", WINDOWS) == "d:foo\\bar"


def test_ensure_rooted_backslash_is_not_a_separator_on_posix():
    assert ensure_rooted("a\\", "b", POSIX) == "a\\/b"


def test_ensure_rooted_rejects_empty_arguments():
    with pytest.raises(InvalidArgumentError, match="root"):
        ensure_rooted("", "x", POSIX)
    with pytest.raises(InvalidArgumentError, match='"p"'):
        ensure_rooted("/a", "", POSIX)
