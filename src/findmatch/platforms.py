"""
Platform facts consulted for path normalization and default match options.

Every helper that cares about separators or drive letters takes a
`PathPlatform` argument defaulting to `HOST`, so Windows behavior can be
exercised on any machine.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PathPlatform:
    """Separator style, drive-letter support and filesystem case sensitivity."""

    sep: str
    drive_letters: bool
    case_insensitive: bool

    @property
    def separators(self) -> str:
        """All characters accepted as a path separator on this platform."""
        return "\\/" if self.drive_letters else "/"


POSIX = PathPlatform(sep="/", drive_letters=False, case_insensitive=False)
WINDOWS = PathPlatform(sep="\\", drive_letters=True, case_insensitive=True)

HOST = WINDOWS if os.name == "nt" else POSIX
