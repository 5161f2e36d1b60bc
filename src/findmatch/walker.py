"""
Directory tree traversal.

`walk()` lists every path under a root, the root included, using an explicit
work stack rather than recursion. The visiting order is part of the contract:
a directory is emitted before its children, and siblings are emitted in the
order the directory listing returned them. Symlinks are never followed, so a
link to a directory is a leaf.
"""

from __future__ import annotations

import logging
import os
import stat
from dataclasses import dataclass

from findmatch.errors import WalkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathEntry:
    """A pending node on the work stack. The root has depth 1."""

    path: str
    depth: int


def walk(root_path: str | os.PathLike[str]) -> list[str]:
    """
    Return `root_path` followed by every path beneath it.

    A root that does not exist yields `[]`. Any other stat or listing failure
    aborts the walk with `WalkError`.
    """
    if not root_path:
        logger.debug("no path specified")
        return []

    # Normalize up front so the root is formatted like the joined child paths.
    root = os.path.normpath(os.fspath(root_path))
    logger.debug("walk root: %r", root)

    try:
        os.lstat(root)
    except FileNotFoundError:
        logger.debug("0 results")
        return []
    except OSError as e:
        raise WalkError(root, e) from e

    result: list[str] = []
    stack: list[PathEntry] = [PathEntry(root, 1)]
    while stack:
        entry = stack.pop()
        result.append(entry.path)
        try:
            # lstat reports on the link itself, so S_ISDIR is false for a symlink.
            mode = os.lstat(entry.path).st_mode
            if not stat.S_ISDIR(mode):
                logger.debug("  %s (file, depth %d)", entry.path, entry.depth)
                continue

            logger.debug("  %s (directory, depth %d)", entry.path, entry.depth)
            children = [
                PathEntry(os.path.join(entry.path, name), entry.depth + 1)
                for name in os.listdir(entry.path)
            ]
        except OSError as e:
            raise WalkError(entry.path, e) from e

        stack.extend(reversed(children))

    logger.debug("%d results", len(result))
    return result
