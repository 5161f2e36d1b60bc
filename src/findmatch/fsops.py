"""Directory creation and copy helpers for hosts that act on walk results."""

from __future__ import annotations

import logging
import os
import shutil
import stat

from findmatch.errors import ConflictingPathError, FindMatchError, InvalidArgumentError

logger = logging.getLogger(__name__)

_DEFAULT_FAILSAFE = 1000


def _failsafe() -> int:
    return int(os.environ.get("FINDMATCH_MKDIRP_FAILSAFE", _DEFAULT_FAILSAFE))


def mkdir_p(path: str | os.PathLike[str]) -> None:
    """
    Create `path` and any missing parents.

    Missing ancestors are found by walking up until an existing directory is
    reached, then created top-down. A directory created concurrently by
    someone else is not an error.
    """
    if not path:
        raise InvalidArgumentError('mkdir_p() parameter "path" cannot be empty')
    p = os.path.normpath(os.fspath(path))

    stack: list[str] = []
    test_dir = p
    while True:
        if len(stack) >= _failsafe():
            # Let the OS report whatever is wrong.
            logger.debug("loop is out of control")
            os.mkdir(p)
            return

        logger.debug("testing directory %r", test_dir)
        try:
            st = os.stat(test_dir)
        except (FileNotFoundError, NotADirectoryError):
            parent = os.path.dirname(test_dir) or os.curdir
            if parent == test_dir:
                raise FindMatchError(
                    f"Unable to create directory {p}. Root directory does not exist: {test_dir}"
                ) from None
            stack.append(test_dir)
            test_dir = parent
            continue

        if not stat.S_ISDIR(st.st_mode):
            raise ConflictingPathError(
                f"Unable to create directory {p}. Conflicting file exists: {test_dir}"
            )
        break

    while stack:
        d = stack.pop()
        logger.debug("mkdir %r", d)
        try:
            os.mkdir(d)
        except FileExistsError:
            if not os.path.isdir(d):
                raise ConflictingPathError(
                    f"Unable to create directory {p}. Conflicting file exists: {d}"
                ) from None
            logger.debug("directory appeared concurrently: %r", d)
        except OSError as e:
            raise FindMatchError(f"Unable to create directory {p}. {e}") from e


def copy(
    source: str | os.PathLike[str],
    dest: str | os.PathLike[str],
    *,
    recursive: bool = False,
    force: bool = True,
) -> None:
    """
    Copy a file, or a directory tree when `recursive` is set.

    Copying into an existing directory places the source inside it. With
    `force=False` an existing destination is an error.
    """
    src = os.fspath(source)
    dst = os.fspath(dest)
    if os.path.isdir(dst):
        dst = os.path.join(dst, os.path.basename(os.path.normpath(src)))

    if os.path.lexists(dst) and not force:
        raise FindMatchError(f"Failed cp: destination already exists: {dst}")

    logger.debug("cp %r -> %r", src, dst)
    try:
        if os.path.isdir(src):
            if not recursive:
                raise FindMatchError(f"Failed cp: {src} is a directory (not copied)")
            shutil.copytree(src, dst, symlinks=True, dirs_exist_ok=True)
        else:
            shutil.copy2(src, dst)
    except OSError as e:
        raise FindMatchError(f"Failed cp: {e}") from e
