"""Reading ignore-style pattern files for `match_paths()`."""

from __future__ import annotations

from pathlib import Path

from findmatch.errors import FindMatchError


def read_pattern_file(path: str | Path) -> list[str]:
    """
    Return the lines of a pattern file.

    Lines are returned as written. Blank lines and `#` comments are left for
    `match_paths()` to skip, so comment handling follows the match options.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise FindMatchError(f"Could not read pattern file '{path}': {e}") from e
