"""
Filesystem traversal and include/exclude glob filtering.

Usage::

    from findmatch import match_paths, walk

    paths = walk("build")
    artifacts = match_paths(paths, ["**/*.whl", "!**/*-dev*"], pattern_root="build")
"""

from findmatch.errors import (
    ConflictingPathError,
    FindMatchError,
    InvalidArgumentError,
    WalkError,
)
from findmatch.matcher import match_paths
from findmatch.options import MatchOptions, default_match_options
from findmatch.rooting import ensure_rooted, is_rooted
from findmatch.walker import PathEntry, walk

__all__ = [
    "ConflictingPathError",
    "FindMatchError",
    "InvalidArgumentError",
    "MatchOptions",
    "PathEntry",
    "WalkError",
    "default_match_options",
    "ensure_rooted",
    "is_rooted",
    "match_paths",
    "walk",
]
