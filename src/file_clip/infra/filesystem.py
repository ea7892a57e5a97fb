"""Infrastructure: local filesystem access for clip, paste and move.

This module owns the recursive tree copy.  A stored file is copied into
the target under its base name; a stored directory is recreated as
``<target>/<basename>`` and filled entry by entry from
:func:`os.scandir`, so every level of the walk can fail independently.

Rules
-----
* Every ``OSError`` is re-raised as :class:`TransferError`.
* Copies are not atomic — a failure part-way leaves a partial tree.
* Existing files at the destination are overwritten (plain ``cp``
  semantics); a directory in the way of a file is an error.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
from pathlib import Path

from file_clip.exceptions import TransferError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Recursive copy
# ---------------------------------------------------------------------------

def copy_tree(source: Path, target_dir: Path) -> int:
    """Copy *source* into *target_dir* under its own name.

    Returns the number of bytes copied.  Raises ``OSError`` on the first
    failure.
    """
    destination = target_dir / source.name
    if source.is_dir():
        if destination.resolve().is_relative_to(source.resolve()):
            raise OSError(f"Cannot copy {source} into itself ({destination})")
        return _copy_directory(source, destination)
    target_dir.mkdir(parents=True, exist_ok=True)
    return _copy_file(source, destination)


def _copy_directory(source: Path, destination: Path) -> int:
    destination.mkdir(parents=True, exist_ok=True)
    total = 0
    with os.scandir(source) as entries:
        for entry in entries:
            child = destination / entry.name
            if entry.is_dir(follow_symlinks=False):
                total += _copy_directory(Path(entry.path), child)
            else:
                total += _copy_file(Path(entry.path), child)
    return total


def _copy_file(source: Path, destination: Path) -> int:
    # A link at the destination is replaced, never written through.
    if destination.is_symlink():
        destination.unlink()

    # Links inside a tree are recreated, not followed.
    if source.is_symlink():
        if destination.exists():
            destination.unlink()
        os.symlink(os.readlink(source), destination)
        logger.debug("LINK | %s -> %s", source, destination)
        return 0

    if destination.is_dir():
        raise IsADirectoryError(
            errno.EISDIR, "Destination is a directory", str(destination)
        )

    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)
    size = destination.stat().st_size
    logger.debug("COPY | %s -> %s (%d bytes)", source, destination, size)
    return size


def remove_any(path: Path) -> None:
    """Remove a file, a link, or a directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    logger.info("DELETE | %s", path)


# ---------------------------------------------------------------------------
# FileSystem adapter
# ---------------------------------------------------------------------------

class LocalFileSystem:
    """Concrete :class:`~file_clip.core.protocols.FileSystem` for the local disk.

    This class satisfies the protocol structurally — no explicit
    inheritance required.
    """

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def is_directory(self, path: str) -> bool:
        return Path(path).is_dir()

    def canonicalize(self, path: str) -> str:
        return str(Path(path).resolve())

    def copy_into(self, source: str, target_dir: str) -> int:
        """Recursively copy *source* into *target_dir*.

        Raises
        ------
        TransferError
            For any filesystem error during the copy.
        """
        try:
            copied = copy_tree(Path(source), Path(target_dir))
        except OSError as exc:
            raise TransferError(f"Could not paste {source}: {exc}") from exc
        logger.info("COPY | %s -> %s", source, target_dir)
        return copied

    def remove(self, path: str) -> None:
        """Remove *path* (file: unlink, directory: recursive delete).

        Raises
        ------
        TransferError
            When the removal fails.
        """
        kind = "directory" if Path(path).is_dir() else "file"
        try:
            remove_any(Path(path))
        except OSError as exc:
            raise TransferError(f"Could not remove {kind} {path}: {exc}") from exc
