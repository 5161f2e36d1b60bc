"""
Include/exclude filtering of a path list against glob patterns.

Each pattern is trimmed, checked for a comment marker, stripped of leading `!`
negations, brace-expanded, rooted, and then matched against the full input
list. Include matches are added to a running set and exclude matches removed
from it. The result is the input list filtered by that set, so order is kept
and nothing is duplicated.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import bracex
from wcmatch import glob

from findmatch.options import MatchOptions, default_match_options
from findmatch.platforms import HOST, PathPlatform
from findmatch.rooting import ensure_rooted, is_rooted

logger = logging.getLogger(__name__)


def _is_include(negate_count: int, options: MatchOptions) -> bool:
    if negate_count == 0:
        return True
    is_even = negate_count % 2 == 0
    return is_even != options.invert_negation


def _expand_braces(pattern: str, options: MatchOptions, platform: PathPlatform) -> list[str]:
    if not options.allow_brace_expansion:
        return [pattern]

    # Brace syntax and backslash escapes cannot coexist on drive-letter platforms.
    logger.debug("expanding braces")
    if platform.drive_letters:
        pattern = pattern.replace("\\", "/")
    # Escapes are kept for wcmatch; expansion size is unbounded.
    return bracex.expand(pattern, keep_escapes=True, limit=0)


def _should_root(pattern: str, options: MatchOptions, platform: PathPlatform) -> bool:
    if is_rooted(pattern, platform):
        return False
    if not options.match_basename_only:
        return True
    return any(sep in pattern for sep in platform.separators)


def _apply(
    paths: Sequence[str], pattern: str, options: MatchOptions, platform: PathPlatform
) -> list[str]:
    if platform.drive_letters:
        pattern = pattern.replace("\\", "/")
    matches = glob.globfilter(paths, pattern, flags=options.glob_flags(platform))
    if not matches and options.allow_null_result:
        matches = [pattern]
    logger.debug("%d matches", len(matches))
    return matches


def match_paths(
    paths: Sequence[str],
    patterns: Sequence[str] | str,
    pattern_root: str | None = None,
    options: MatchOptions | None = None,
    *,
    platform: PathPlatform = HOST,
) -> list[str]:
    """
    Filter `paths` by include/exclude glob `patterns`.

    Every pattern is evaluated against the original `paths`, never against the
    running result, so a later include can restore a path an earlier exclude
    removed and vice versa. Relative patterns are anchored under
    `pattern_root` when one is given.
    """
    logger.debug("pattern_root: %r", pattern_root)
    base_options = options if options is not None else default_match_options(platform)
    for line in base_options.describe():
        logger.debug("match options %s", line)

    if isinstance(patterns, str):
        patterns = [patterns]

    matched: set[str] = set()
    for raw in patterns:
        logger.debug("pattern: %r", raw)
        pattern = (raw or "").strip()
        if not pattern:
            logger.debug("skipping empty pattern")
            continue

        opts = base_options
        if opts.allow_comments and pattern.startswith("#"):
            logger.debug("skipping comment")
            continue
        # Brace expansion could produce a leading '#'.
        opts = opts.locked(allow_comments=False)

        negate_count = 0
        if opts.allow_negation:
            negate_count = len(pattern) - len(pattern.lstrip("!"))
            pattern = pattern[negate_count:]
            if negate_count:
                logger.debug("trimmed leading '!'. pattern: %r", pattern)
        include = _is_include(negate_count, opts)
        # Brace expansion could produce a leading '!'.
        opts = opts.locked(allow_negation=False, invert_negation=False)

        expanded = _expand_braces(pattern, opts, platform)
        opts = opts.locked(allow_brace_expansion=False)

        for sub in expanded:
            if len(expanded) != 1 or sub != pattern:
                logger.debug("pattern: %r", sub)
            sub = sub.strip()
            if not sub:
                logger.debug("skipping empty pattern")
                continue

            if pattern_root and _should_root(sub, opts, platform):
                sub = ensure_rooted(pattern_root, sub, platform)
                logger.debug("rooted pattern: %r", sub)

            if include:
                logger.debug("applying include pattern against original list")
                matched.update(_apply(paths, sub, opts, platform))
            else:
                logger.debug("applying exclude pattern against original list")
                matched.difference_update(_apply(paths, sub, opts, platform))

    result = [p for p in paths if p in matched]
    logger.debug("%d final results", len(result))
    return result
