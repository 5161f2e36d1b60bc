"""
TOML-based config file loading for findmatch.

Searches for `.findmatch.toml`, `findmatch.toml`, or `pyproject.toml [tool.findmatch]`
walking up from the current directory. Config values are merged with CLI flags
using three-way precedence: explicit CLI flags > config file > built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, TypeVar, cast

from findmatch.errors import ConfigError
from findmatch.options import MatchOptions

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]


@dataclass
class FindMatchConfig:
    """
    Parsed config from a TOML file. Fields are `None` when not set in the config,
    allowing the merge logic to distinguish "not configured" from "explicitly set
    to default value".
    """

    # Patterns
    patterns: list[str] | None = None
    pattern_root: str | None = None
    # Match options
    brace: bool | None = None
    globstar: bool | None = None
    dot: bool | None = None
    extglob: bool | None = None
    nocase: bool | None = None
    nonull: bool | None = None
    match_base: bool | None = None
    comments: bool | None = None
    negation: bool | None = None
    flip_negation: bool | None = None
    # Discovery
    respect_gitignore: bool | None = None

    def apply_to(self, options: MatchOptions) -> MatchOptions:
        """Return `options` with every configured match flag applied."""
        return apply_match_flags(self, options)


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".findmatch.toml", "findmatch.toml", "pyproject.toml"]

# Mapping from TOML kebab-case keys to Python snake_case field names
_KEBAB_TO_SNAKE: dict[str, str] = {
    "pattern-root": "pattern_root",
    "match-base": "match_base",
    "flip-negation": "flip_negation",
    "respect-gitignore": "respect_gitignore",
}

# Config field name -> MatchOptions field name
_CONFIG_TO_OPTION: dict[str, str] = {
    "brace": "allow_brace_expansion",
    "globstar": "allow_globstar",
    "dot": "match_dotfiles",
    "extglob": "allow_extglob",
    "nocase": "case_insensitive",
    "nonull": "allow_null_result",
    "match_base": "match_basename_only",
    "comments": "allow_comments",
    "negation": "allow_negation",
    "flip_negation": "invert_negation",
}

_VALID_FIELDS = {f.name for f in fields(FindMatchConfig)}
_BOOL_FIELDS = set(_CONFIG_TO_OPTION) | {"respect_gitignore"}


def apply_match_flags(source: object, options: MatchOptions) -> MatchOptions:
    """
    Return `options` with the match flags set on `source` applied.

    `source` is anything carrying the config field names (`brace`, `nocase`,
    ...), such as a `FindMatchConfig` or the CLI options. `None` means unset.
    """
    overrides = {
        option_name: getattr(source, cfg_name)
        for cfg_name, option_name in _CONFIG_TO_OPTION.items()
        if getattr(source, cfg_name, None) is not None
    }
    return options.locked(**overrides)


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. Search order per directory: `.findmatch.toml` >
    `findmatch.toml` > `pyproject.toml` (only if it has `[tool.findmatch]`).
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                if filename == "pyproject.toml":
                    if _pyproject_has_findmatch_section(candidate):
                        return candidate
                else:
                    return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def _pyproject_has_findmatch_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text())
        return "findmatch" in data.get("tool", {})
    except (tomllib.TOMLDecodeError, OSError):
        return False


def load_config(config_path: Path) -> FindMatchConfig:
    """
    Load a `FindMatchConfig` from a TOML file. Supports both standalone
    `findmatch.toml` / `.findmatch.toml` and `pyproject.toml` (extracts
    `[tool.findmatch]`). TOML kebab-case keys are mapped to Python snake_case.
    """
    try:
        data = tomllib.loads(config_path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("findmatch", {})

    config = _parse_config_data(data, config_path)
    # A relative pattern root is anchored at the directory holding the config.
    if config.pattern_root and not Path(config.pattern_root).is_absolute():
        config.pattern_root = str(config_path.parent / config.pattern_root)
    return config


def _parse_config_data(data: dict[str, Any], source: Path | None = None) -> FindMatchConfig:
    """Parse a flat or sectioned TOML dict into FindMatchConfig, checking value types."""
    # Flatten sections: [patterns] and [match] merge into top level
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            for sub_key, sub_value in cast(dict[str, Any], value).items():
                flat[sub_key] = sub_value
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = _KEBAB_TO_SNAKE.get(key, key.replace("-", "_"))
        if snake_key in _VALID_FIELDS:
            _check_type(snake_key, key, value, source)
            mapped[snake_key] = value

    return FindMatchConfig(**mapped)


_T = TypeVar("_T")


def merge_cli_with_config(
    cli_opts: _T,
    config: FindMatchConfig | None,
    explicit_flags: set[str],
) -> _T:
    """
    Merge CLI options with config file settings.

    Precedence: explicit CLI flags > config file > built-in defaults.
    """
    if config is None:
        return cli_opts

    for cfg_field in fields(FindMatchConfig):
        cfg_value = getattr(config, cfg_field.name)
        if cfg_value is None:
            continue  # Not set in config

        if cfg_field.name in explicit_flags:
            continue

        if hasattr(cli_opts, cfg_field.name):
            setattr(cli_opts, cfg_field.name, cfg_value)

    return cli_opts


def _check_type(field_name: str, key: str, value: Any, source: Path | None) -> None:
    where = f" in {source}" if source else ""
    if field_name == "patterns":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"Config key '{key}'{where} must be a list of strings")
    elif field_name == "pattern_root":
        if not isinstance(value, str) or not value:
            raise ConfigError(f"Config key '{key}'{where} must be a non-empty string")
    elif field_name in _BOOL_FIELDS and not isinstance(value, bool):
        raise ConfigError(f"Config key '{key}'{where} must be true or false")
