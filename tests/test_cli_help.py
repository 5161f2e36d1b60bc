"""Tests for CLI help text."""

from __future__ import annotations

import pytest

from findmatch.cli import main


def _render_help(capsys: pytest.CaptureFixture[str]) -> str:
    """Run `findmatch --help` via CLI entrypoint and return captured stdout."""
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    return capsys.readouterr().out


def test_help_includes_tagline(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "findmatch: walk a directory tree and filter it with include/exclude globs" in out


def test_help_includes_common_usage(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    assert "Common usage:" in out
    assert "findmatch src '**/*.py' '!**/test_*.py'" in out


def test_help_lists_match_flags(capsys: pytest.CaptureFixture[str]) -> None:
    out = _render_help(capsys)
    for flag in ("--brace", "--no-globstar", "--nocase", "--match-base", "--flip-negate"):
        assert flag in out


def test_nocase_and_case_are_exclusive(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--nocase", "--case", "."])
    assert exc.value.code == 2
