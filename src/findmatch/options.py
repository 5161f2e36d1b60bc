"""
Glob match options.

`MatchOptions` is immutable. The per-pattern pipeline in `findmatch.matcher`
derives locked-down copies with `locked()` instead of mutating a shared record,
so flags forced while processing one pattern never reach the next.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from wcmatch import glob

from findmatch.platforms import HOST, PathPlatform


@dataclass(frozen=True)
class MatchOptions:
    """
    Glob semantics for one `match_paths()` call.

    Brace expansion is off unless enabled. `case_insensitive` should follow the
    host filesystem; use `default_match_options()` to get that right.
    """

    allow_brace_expansion: bool = False
    allow_globstar: bool = True
    match_dotfiles: bool = True
    allow_extglob: bool = True
    case_insensitive: bool = False
    allow_null_result: bool = False
    match_basename_only: bool = False
    allow_comments: bool = True
    allow_negation: bool = True
    invert_negation: bool = False

    def locked(self, **flags: bool) -> MatchOptions:
        """Return a copy with the given flags forced."""
        return replace(self, **flags)

    def glob_flags(self, platform: PathPlatform = HOST) -> int:
        """
        Translate to `wcmatch.glob` flags for matching paths of `platform`.

        Negation and braces are handled before a pattern reaches wcmatch, so
        `NEGATE` and `BRACE` are never set here.
        """
        flags = 0
        if self.allow_globstar:
            flags |= glob.GLOBSTAR
        if self.match_dotfiles:
            flags |= glob.DOTGLOB
        if self.allow_extglob:
            flags |= glob.EXTGLOB
        flags |= glob.IGNORECASE if self.case_insensitive else glob.CASE
        if self.match_basename_only:
            flags |= glob.MATCHBASE
        flags |= glob.FORCEWIN if platform.drive_letters else glob.FORCEUNIX
        return flags

    def describe(self) -> list[str]:
        """One `name: value` line per option, for debug logging."""
        return [f"{f.name}: {getattr(self, f.name)!r}" for f in fields(self)]


def default_match_options(platform: PathPlatform = HOST) -> MatchOptions:
    return MatchOptions(case_insensitive=platform.case_insensitive)
