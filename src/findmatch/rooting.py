"""
Path rooting helpers used when anchoring patterns to a pattern root.

A path is rooted when, after separator normalization, it starts with the
platform's root marker: `/` on POSIX, and on drive-letter platforms either a
leading `\\` (which also covers `\\\\server\\share`) or a `C:` style prefix.
"""

from __future__ import annotations

import re

from findmatch.errors import InvalidArgumentError
from findmatch.platforms import HOST, PathPlatform

_DRIVE_PREFIX = re.compile(r"^[A-Za-z]:")
_BARE_DRIVE = re.compile(r"^[A-Za-z]:$")
_UNC_PREFIX = re.compile(r"^\\\\+[^\\]")


def normalize_separators(p: str | None, platform: PathPlatform = HOST) -> str:
    """Convert to the platform separator and collapse redundant separators."""
    p = p or ""
    if platform.drive_letters:
        p = p.replace("/", "\\")
        # Preserve the leading double separator of a UNC path.
        is_unc = _UNC_PREFIX.match(p) is not None
        return ("\\" if is_unc else "") + re.sub(r"\\\\+", r"\\", p)

    return re.sub(r"//+", "/", p)


def is_rooted(p: str | None, platform: PathPlatform = HOST) -> bool:
    p = normalize_separators(p, platform)
    if not p:
        raise InvalidArgumentError('is_rooted() parameter "p" cannot be empty')

    if platform.drive_letters:
        return p.startswith("\\") or _DRIVE_PREFIX.match(p) is not None

    return p.startswith("/")


def ensure_rooted(root: str | None, p: str | None, platform: PathPlatform = HOST) -> str:
    """
    Return `p` anchored under `root`, or `p` itself when it is already rooted.

    Exactly one separator is inserted between the two unless `root` already
    ends with one. A bare drive root (`C:`) is concatenated directly, giving a
    drive-relative path.
    """
    if not root:
        raise InvalidArgumentError('ensure_rooted() parameter "root" cannot be empty')
    if not p:
        raise InvalidArgumentError('ensure_rooted() parameter "p" cannot be empty')

    if is_rooted(p, platform):
        return p

    if platform.drive_letters and _BARE_DRIVE.match(root):
        return root + p

    if not root.endswith(tuple(platform.separators)):
        root += platform.sep

    return root + p
