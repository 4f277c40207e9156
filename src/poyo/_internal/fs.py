"""Filesystem helpers shared by the registry, scaffolder, and reconciler.

- ``atomic_write``: temp file in the destination directory, then ``os.replace``
- ``create_exclusive``: write only if the file does not exist yet
- ``find_files``: recursive scan returning ``/``-separated relative paths
- ``delete_empty_parents``: best-effort cleanup after a file is removed
"""

import contextlib
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path

from poyo.errors import FileOperationError

logger = logging.getLogger("poyo.fs")


def atomic_write(path: Path, text: str) -> None:
    """Replace *path* with *text* so readers never see a partial file.

    Raises:
        FileOperationError: If the temp file cannot be written or moved.
    """
    try:
        fd, temp_name = tempfile.mkstemp(
            prefix=f".{path.name}.",
            suffix=".tmp",
            dir=str(path.parent),
        )
    except OSError as exc:
        msg = f"could not write {path}: {exc}"
        raise FileOperationError(msg) from exc

    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, path)
    except OSError as exc:
        with contextlib.suppress(OSError):
            temp_path.unlink(missing_ok=True)
        msg = f"could not write {path}: {exc}"
        raise FileOperationError(msg) from exc


def create_exclusive(path: Path, text: str) -> bool:
    """Create *path* with *text* unless it already exists.

    Opens with mode ``"x"`` so two processes racing on the same file
    cannot both write it.  Parent directories are created as needed.

    Returns:
        True if this call created the file, False if it already existed.

    Raises:
        FileOperationError: On any other filesystem failure.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("x", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
    except FileExistsError:
        return False
    except OSError as exc:
        msg = f"could not create {path}: {exc}"
        raise FileOperationError(msg) from exc
    return True


def find_files(root: Path, base: Path, predicate: Callable[[str], bool]) -> list[str]:
    """Recursively list files under *root* accepted by *predicate*.

    Paths are returned relative to *base*, ``/``-separated, sorted.  The
    predicate receives that relative path.  A missing *root* yields an
    empty list.
    """
    if not root.is_dir():
        return []

    found: list[str] = []
    for item in root.rglob("*"):
        if not item.is_file():
            continue
        relative = item.relative_to(base).as_posix()
        if predicate(relative):
            found.append(relative)
    return sorted(found)


def delete_file(path: Path) -> None:
    """Delete *path*.

    Raises:
        FileOperationError: If the file exists but cannot be removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as exc:
        msg = f"could not delete {path}: {exc}"
        raise FileOperationError(msg) from exc
    logger.debug("deleted %s", path)


def delete_empty_parents(path: Path, root: Path) -> list[Path]:
    """Remove now-empty directories from ``path.parent`` up to *root*.

    *root* itself is never removed.  Stops at the first non-empty
    directory.  Failures are logged and swallowed: cleanup must not fail
    the operation that triggered it.

    Returns:
        The directories that were removed, innermost first.
    """
    removed: list[Path] = []
    directory = path.parent
    while directory != root and directory.is_relative_to(root):
        try:
            if any(directory.iterdir()):
                break
            directory.rmdir()
        except OSError as exc:
            logger.debug("cleanup of %s skipped: %s", directory, exc)
            break
        logger.debug("removed empty directory %s", directory)
        removed.append(directory)
        directory = directory.parent
    return removed
