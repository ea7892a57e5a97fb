"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — so services can be exercised with in-memory fakes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class PathStore(Protocol):
    """Contract for the persistent list of clipped paths."""

    def append(self, paths: Sequence[str]) -> None:
        """Append *paths* to the store, one entry each, in order.

        The store is created when absent.  Duplicates are kept.

        Raises
        ------
        StoreError
            When the store cannot be opened or written.
        """
        ...  # pragma: no cover

    def read(self) -> tuple[str, ...]:
        """Return every stored path in file order.

        A store that does not exist yet reads as empty.

        Raises
        ------
        StoreError
            When an existing store cannot be read.
        """
        ...  # pragma: no cover

    def erase(self) -> bool:
        """Delete the store.  Return ``True`` if a store was removed.

        Raises
        ------
        StoreError
            When an existing store cannot be deleted.
        """
        ...  # pragma: no cover


class FileSystem(Protocol):
    """Contract for the filesystem operations paste and clip rely on."""

    def exists(self, path: str) -> bool:
        ...  # pragma: no cover

    def is_directory(self, path: str) -> bool:
        ...  # pragma: no cover

    def canonicalize(self, path: str) -> str:
        """Return the absolute form of *path* with symlinks resolved."""
        ...  # pragma: no cover

    def copy_into(self, source: str, target_dir: str) -> int:
        """Recursively copy *source* into *target_dir* under its base name.

        Returns the number of bytes copied.

        Raises
        ------
        TransferError
            When any part of the copy fails.  The copy is not atomic.
        """
        ...  # pragma: no cover

    def remove(self, path: str) -> None:
        """Remove a file, or a directory recursively.

        Raises
        ------
        TransferError
            When the removal fails.
        """
        ...  # pragma: no cover
