"""Core paste service — copy or move every stored path into a directory.

The service reads the store once, then processes each entry in order:

1. Skip entries whose source no longer exists.
2. Copy the entry into the target via the injected
   :class:`~file_clip.core.protocols.FileSystem`.
3. In :attr:`PasteMode.MOVE`, remove the original after a successful copy.

Per-entry failures become :class:`~file_clip.core.models.PasteOutcome`
records; only a bad target directory or an unreadable store is fatal.
The store itself is never modified.
"""

from __future__ import annotations

from pathlib import PurePath

from file_clip.core.models import PasteMode, PasteOutcome, PasteReport, PasteStatus
from file_clip.core.protocols import FileSystem, PathStore
from file_clip.exceptions import FileClipError, TargetDirectoryError


class PasteService:
    """Stateless service behind the ``v`` and ``m`` commands.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`PathStore` protocol.
    filesystem:
        Any object satisfying the :class:`FileSystem` protocol.
    """

    def __init__(self, store: PathStore, filesystem: FileSystem) -> None:
        self._store: PathStore = store
        self._fs: FileSystem = filesystem

    # ------------------------------------------------------------------
    # Target resolution
    # ------------------------------------------------------------------

    def resolve_target(self, target: str) -> str:
        """Return the absolute form of *target*.

        Raises
        ------
        TargetDirectoryError
            When *target* does not exist or is not a directory.
        """
        if not self._fs.is_directory(target):
            raise TargetDirectoryError(
                f"Could not paste clipped files: {target} is not a directory.",
                hint="Create the directory first, or pick an existing one.",
            )
        return self._fs.canonicalize(target)

    # ------------------------------------------------------------------
    # Single entry
    # ------------------------------------------------------------------

    @staticmethod
    def destination_for(source: str, target: str) -> str:
        """Where *source* lands inside *target* (pure path arithmetic)."""
        return str(PurePath(target) / PurePath(source).name)

    def paste_entry(self, source: str, target: str, mode: PasteMode) -> PasteOutcome:
        """Copy (and in move mode, remove) a single stored entry."""
        if not self._fs.exists(source):
            return PasteOutcome(
                source=source,
                destination=None,
                status=PasteStatus.SKIPPED_MISSING,
                message=f"Could not paste {source}: path does not exist",
            )

        destination = self.destination_for(source, target)
        try:
            copied = self._fs.copy_into(source, target)
        except (FileClipError, OSError) as exc:
            return PasteOutcome(
                source=source,
                destination=destination,
                status=PasteStatus.COPY_FAILED,
                message=str(exc),
            )

        if mode is PasteMode.COPY:
            return PasteOutcome(
                source=source,
                destination=destination,
                status=PasteStatus.COPIED,
                message=f"Copied {source} -> {destination}",
                bytes_copied=copied,
            )

        try:
            self._fs.remove(source)
        except (FileClipError, OSError) as exc:
            return PasteOutcome(
                source=source,
                destination=destination,
                status=PasteStatus.REMOVE_FAILED,
                message=str(exc),
                bytes_copied=copied,
            )

        return PasteOutcome(
            source=source,
            destination=destination,
            status=PasteStatus.MOVED,
            message=f"Moved {source} -> {destination}",
            bytes_copied=copied,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def paste(self, target: str, mode: PasteMode = PasteMode.COPY) -> PasteReport:
        """Process every stored entry into *target*.

        Raises
        ------
        TargetDirectoryError
            When *target* is not an existing directory.
        StoreError
            When the store exists but cannot be read.
        """
        resolved = self.resolve_target(target)
        entries = self._store.read()
        outcomes = tuple(
            self.paste_entry(source, resolved, mode) for source in entries
        )
        return PasteReport(target=resolved, mode=mode, outcomes=outcomes)
