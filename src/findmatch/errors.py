"""Exception family shared by the walker, matcher and filesystem helpers."""

from __future__ import annotations


class FindMatchError(Exception): ...


class InvalidArgumentError(FindMatchError, ValueError): ...


class ConflictingPathError(FindMatchError, FileExistsError): ...


class WalkError(FindMatchError, OSError):
    """A stat or directory listing failed part way through a walk."""

    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"Failed find: {path}: {cause}")
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        return str(self.args[0])


class ConfigError(FindMatchError, ValueError): ...
