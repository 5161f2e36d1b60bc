"""Gitignore handling using pathspec."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


def load_gitignore(directory: str | Path) -> pathspec.PathSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `PathSpec`,
    or `None` if the file doesn't exist or is empty.
    """
    gitignore = Path(directory) / ".gitignore"
    if not gitignore.is_file():
        return None
    lines = gitignore.read_text().splitlines()
    lines = [line for line in lines if line.strip() and not line.strip().startswith("#")]
    if not lines:
        return None
    return pathspec.PathSpec.from_lines("gitignore", lines)


def drop_gitignored(paths: Sequence[str], root: str | Path) -> list[str]:
    """
    Remove paths matched by the `.gitignore` in `root`, keeping input order.

    Paths are tested relative to `root`. Directories are tested with a trailing
    `/` so directory-only patterns like `build/` apply, and a path under an
    ignored directory is dropped with it. The root itself is never dropped.
    """
    spec = load_gitignore(root)
    if spec is None:
        return list(paths)

    root_str = os.path.normpath(os.fspath(root))
    kept: list[str] = []
    for p in paths:
        rel = os.path.relpath(p, root_str)
        if rel == "." or rel.startswith(".."):
            kept.append(p)
            continue
        rel = Path(rel).as_posix()
        if os.path.isdir(p) and not os.path.islink(p):
            rel += "/"
        if spec.match_file(rel):
            logger.debug("gitignored: %s", p)
            continue
        kept.append(p)
    return kept
