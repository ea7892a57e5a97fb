"""Custom exception hierarchy for file-clip.

All exceptions that cross layer boundaries must inherit from
:class:`FileClipError`.  Raw ``OSError`` instances raised by the
filesystem must NEVER propagate beyond the infrastructure layer — they
are caught there and re-raised as a typed subclass defined here.

Hierarchy
---------
FileClipError
├── UsageError
├── HomeDirectoryError
├── StoreError
├── TargetDirectoryError
└── TransferError
"""

from __future__ import annotations


class FileClipError(Exception):
    """Base exception for all file-clip errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command line ----------------------------------------------------------

class UsageError(FileClipError):
    """Raised for a missing or unknown command, or a wrong argument count."""


# --- Store -----------------------------------------------------------------

class HomeDirectoryError(FileClipError):
    """Raised when the user's home directory cannot be determined."""


class StoreError(FileClipError):
    """Raised when the store file cannot be opened, written, read or deleted."""


# --- Paste / move ----------------------------------------------------------

class TargetDirectoryError(FileClipError):
    """Raised when the paste/move target is missing or not a directory."""


class TransferError(FileClipError):
    """Raised when copying or removing a single stored entry fails.

    Unlike the other subclasses this one is recoverable: the paste
    service turns it into a per-entry outcome and carries on.
    """
