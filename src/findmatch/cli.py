#!/usr/bin/env python3
"""
findmatch: walk a directory tree and filter it with include/exclude globs

Common usage:
  findmatch src
  findmatch src '**/*.py' '!**/test_*.py'
  findmatch . --brace '*.{md,txt}'
  findmatch build --patterns-from .artifactpatterns

Patterns are rooted at ROOT unless --pattern-root is given. A leading `!`
excludes, `!!` includes again, and lines starting with `#` are comments.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from findmatch.config import (
    apply_match_flags,
    find_config_file,
    load_config,
    merge_cli_with_config,
)
from findmatch.errors import FindMatchError
from findmatch.gitignore import drop_gitignored
from findmatch.matcher import match_paths
from findmatch.options import MatchOptions, default_match_options
from findmatch.patterns import read_pattern_file
from findmatch.walker import walk


@dataclass
class Options:
    """Command-line options for the findmatch tool."""

    root: str | None
    patterns: list[str]
    patterns_from: list[str]
    pattern_root: str | None
    # Match options (None means use the built-in default)
    brace: bool | None
    globstar: bool | None
    dot: bool | None
    extglob: bool | None
    nocase: bool | None
    nonull: bool | None
    match_base: bool | None
    comments: bool | None
    negation: bool | None
    flip_negation: bool | None
    respect_gitignore: bool | None
    verbose: bool
    version: bool

    def match_options(self) -> MatchOptions:
        """Build `MatchOptions` from the host defaults plus any flags that were set."""
        return apply_match_flags(self, default_match_options())


# Match-option flags, all defaulting to None so explicitly passed flags can be
# told apart from unset ones when merging with a config file.
_OPTION_FLAGS: list[tuple[str, str, bool, str]] = [
    ("--brace", "brace", True, "Expand {a,b} alternatives in patterns"),
    ("--no-globstar", "globstar", False, "Treat ** like * (no directory spanning)"),
    ("--no-dot", "dot", False, "Do not let wildcards match a leading dot"),
    ("--no-extglob", "extglob", False, "Disable extended globs like @(a|b)"),
    ("--nonull", "nonull", True, "Treat a pattern with no matches as matching itself"),
    ("--match-base", "match_base", True, "Match slash-free patterns against basenames"),
    ("--no-comments", "comments", False, "Do not treat patterns starting with # as comments"),
    ("--no-negate", "negation", False, "Do not treat leading ! as negation"),
    ("--flip-negate", "flip_negation", True, "Invert the include/exclude meaning of leading !"),
    (
        "--respect-gitignore",
        "respect_gitignore",
        True,
        "Drop paths matched by the root's .gitignore",
    ),
]


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns a tuple of (options, explicit_flags) where `explicit_flags`
    tracks which config-mergeable settings the user explicitly passed.
    """
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="findmatch",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("root", nargs="?", default=None, help="Directory or file to walk")
    parser.add_argument(
        "patterns",
        nargs="*",
        default=[],
        metavar="PATTERN",
        help="Glob patterns; prefix with ! to exclude (default: list everything)",
    )
    parser.add_argument(
        "--pattern-root",
        type=str,
        default=None,
        dest="pattern_root",
        metavar="DIR",
        help="Root that relative patterns are anchored to (default: ROOT)",
    )
    parser.add_argument(
        "--patterns-from",
        action="append",
        default=[],
        dest="patterns_from",
        metavar="FILE",
        help="Read additional patterns from FILE, one per line. Can be repeated",
    )
    for flag, dest, const, help_text in _OPTION_FLAGS:
        parser.add_argument(flag, dest=dest, action="store_const", const=const, help=help_text)
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "--nocase",
        dest="nocase",
        action="store_const",
        const=True,
        help="Match case-insensitively (default on Windows)",
    )
    case_group.add_argument(
        "--case",
        dest="nocase",
        action="store_const",
        const=False,
        help="Match case-sensitively (default elsewhere)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log traversal and matching to stderr"
    )
    parser.add_argument("--version", action="store_true", help="Show version information and exit")
    opts = parser.parse_intermixed_args(args)

    mergeable = [dest for _, dest, _, _ in _OPTION_FLAGS] + ["nocase", "pattern_root"]
    explicit_flags = {name for name in mergeable if getattr(opts, name) is not None}
    if opts.patterns or opts.patterns_from:
        explicit_flags.add("patterns")

    return (
        Options(
            root=opts.root,
            patterns=opts.patterns,
            patterns_from=opts.patterns_from,
            pattern_root=opts.pattern_root,
            brace=opts.brace,
            globstar=opts.globstar,
            dot=opts.dot,
            extglob=opts.extglob,
            nocase=opts.nocase,
            nonull=opts.nonull,
            match_base=opts.match_base,
            comments=opts.comments,
            negation=opts.negation,
            flip_negation=opts.flip_negation,
            respect_gitignore=opts.respect_gitignore,
            verbose=opts.verbose,
            version=opts.version,
        ),
        explicit_flags,
    )


def _collect_patterns(options: Options) -> list[str]:
    patterns = list(options.patterns)
    for pattern_file in options.patterns_from:
        patterns.extend(read_pattern_file(pattern_file))
    return patterns


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the findmatch CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("findmatch")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if options.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    if not options.root:
        print(
            "Error: No root specified. Provide a directory or file to walk"
            " (use '.' for current directory). Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    root = os.path.normpath(options.root)
    try:
        config_path = find_config_file(Path.cwd())
        if config_path:
            merge_cli_with_config(options, load_config(config_path), explicit_flags)

        paths = walk(root)
        if options.respect_gitignore:
            paths = drop_gitignored(paths, root)

        patterns = _collect_patterns(options)
        if patterns:
            paths = match_paths(
                paths,
                patterns,
                pattern_root=options.pattern_root or root,
                options=options.match_options(),
            )
    except FindMatchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for p in paths:
        print(p)
    return 0


if __name__ == "__main__":
    sys.exit(main())
