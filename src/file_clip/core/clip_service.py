"""Core clip service — record, list and erase clipped paths.

This service delegates storage to a
:class:`~file_clip.core.protocols.PathStore` and path inspection to a
:class:`~file_clip.core.protocols.FileSystem`, both injected at
construction time.

Guarantees
----------
* Pure orchestration — no direct filesystem access, no ``print()``.
* Missing arguments are reported as outcomes, never raised.
* No deduplication: clipping a path twice stores it twice.
"""

from __future__ import annotations

from collections.abc import Iterable

from file_clip.core.models import ClipOutcome, ClipStatus
from file_clip.core.protocols import FileSystem, PathStore
from file_clip.exceptions import FileClipError, StoreError


class ClipService:
    """Stateless service behind the ``c``, ``l`` and ``e`` commands.

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
    # Argument inspection (no store access)
    # ------------------------------------------------------------------

    def inspect(self, argument: str) -> ClipOutcome:
        """Decide whether *argument* can be stored, and in which form."""
        if not self._fs.exists(argument):
            return ClipOutcome(
                argument=argument,
                stored_path=None,
                status=ClipStatus.SKIPPED_MISSING,
                message=f"Skipped argument {argument}; path does not exist",
            )

        canonical = self._fs.canonicalize(argument)
        if "\n" in canonical or "\r" in canonical:
            return ClipOutcome(
                argument=argument,
                stored_path=None,
                status=ClipStatus.SKIPPED_UNSTORABLE,
                message=f"Skipped argument {argument!r}; path contains a line break",
            )

        try:
            canonical.encode("utf-8")
        except UnicodeEncodeError:
            return ClipOutcome(
                argument=argument,
                stored_path=None,
                status=ClipStatus.SKIPPED_UNSTORABLE,
                message=f"Skipped argument {argument!r}; path name is not valid UTF-8",
            )

        return ClipOutcome(
            argument=argument,
            stored_path=canonical,
            status=ClipStatus.STORED,
            message=f"Clipped {canonical}",
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def clip(self, arguments: Iterable[str]) -> tuple[ClipOutcome, ...]:
        """Append every existing argument to the store.

        The store is written even when nothing qualifies, so a store that
        cannot be opened fails consistently.

        Raises
        ------
        StoreError
            When the store cannot be opened or written.
        """
        outcomes = tuple(self.inspect(argument) for argument in arguments)
        paths = [o.stored_path for o in outcomes if o.stored_path is not None]
        try:
            self._store.append(paths)
        except FileClipError:
            raise
        except Exception as exc:
            raise StoreError(f"Unexpected store error: {exc}") from exc
        return outcomes

    def list_paths(self) -> tuple[str, ...]:
        """Return the stored paths in file order (empty if no store)."""
        return self._store.read()

    def erase(self) -> bool:
        """Delete the store.  Return ``True`` if there was one to delete."""
        return self._store.erase()
