"""Tests for match options."""

from __future__ import annotations

import dataclasses

import pytest
from wcmatch import glob

from findmatch.options import MatchOptions, default_match_options
from findmatch.platforms import POSIX, WINDOWS


def test_defaults():
    options = MatchOptions()
    assert options.allow_brace_expansion is False
    assert options.allow_globstar is True
    assert options.match_dotfiles is True
    assert options.allow_extglob is True
    assert options.allow_null_result is False
    assert options.match_basename_only is False
    assert options.allow_comments is True
    assert options.allow_negation is True
    assert options.invert_negation is False


def test_default_case_sensitivity_follows_platform():
    assert default_match_options(POSIX).case_insensitive is False
    assert default_match_options(WINDOWS).case_insensitive is True


def test_options_are_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MatchOptions().allow_comments = False  # type: ignore[misc]


def test_locked_returns_new_copy():
    base = MatchOptions()
    locked = base.locked(allow_comments=False, allow_negation=False)
    assert locked.allow_comments is False
    assert locked.allow_negation is False
    assert base.allow_comments is True
    assert base.allow_negation is True


def test_glob_flags_defaults():
    flags = MatchOptions().glob_flags(POSIX)
    assert flags & glob.GLOBSTAR
    assert flags & glob.DOTGLOB
    assert flags & glob.EXTGLOB
    assert flags & glob.CASE
    assert flags & glob.FORCEUNIX
    assert not flags & glob.BRACE
    assert not flags & glob.NEGATE
    assert not flags & glob.MATCHBASE


def test_glob_flags_follow_options():
    options = MatchOptions(
        allow_globstar=False,
        match_dotfiles=False,
        allow_extglob=False,
        case_insensitive=True,
        match_basename_only=True,
        allow_brace_expansion=True,
    )
    flags = options.glob_flags(WINDOWS)
    assert not flags & glob.GLOBSTAR
    assert not flags & glob.DOTGLOB
    assert not flags & glob.EXTGLOB
    assert not flags & glob.BRACE
    assert flags & glob.IGNORECASE
    assert flags & glob.MATCHBASE
    assert flags & glob.FORCEWIN


def test_describe_lists_every_option():
    lines = MatchOptions().describe()
    assert len(lines) == len(dataclasses.fields(MatchOptions))
    assert "allow_brace_expansion: False" in lines
