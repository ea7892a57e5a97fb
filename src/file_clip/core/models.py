"""Domain models for file-clip.

All outcome models are **frozen** dataclasses — immutable value objects
with no behaviour beyond data access and a few derived counters.  They
carry zero I/O and no dependencies on external packages.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Clip
# ---------------------------------------------------------------------------

class ClipStatus(Enum):
    """Result of clipping a single command-line argument."""

    STORED = "stored"
    SKIPPED_MISSING = "skipped_missing"
    SKIPPED_UNSTORABLE = "skipped_unstorable"  # line break or non-UTF-8 name


@dataclass(frozen=True, slots=True)
class ClipOutcome:
    """What happened to one argument passed to ``clip``."""

    argument: str
    """The path exactly as given on the command line."""

    stored_path: str | None
    """Canonical absolute path written to the store, or ``None``."""

    status: ClipStatus

    message: str
    """Human-readable description, suitable for display."""

    @property
    def stored(self) -> bool:
        return self.status is ClipStatus.STORED


# ---------------------------------------------------------------------------
# Paste / move
# ---------------------------------------------------------------------------

class PasteMode(Enum):
    """Whether originals are kept (``COPY``) or removed (``MOVE``)."""

    COPY = "copy"
    MOVE = "move"


class PasteStatus(Enum):
    """Result of pasting a single stored entry."""

    COPIED = "copied"
    MOVED = "moved"
    SKIPPED_MISSING = "skipped_missing"  # source gone since it was clipped
    COPY_FAILED = "copy_failed"
    REMOVE_FAILED = "remove_failed"  # copied, but original still in place


@dataclass(frozen=True, slots=True)
class PasteOutcome:
    """What happened to one stored entry during paste or move."""

    source: str
    destination: str | None
    status: PasteStatus
    message: str
    bytes_copied: int = 0

    @property
    def succeeded(self) -> bool:
        return self.status in (PasteStatus.COPIED, PasteStatus.MOVED)


@dataclass(frozen=True, slots=True)
class PasteReport:
    """Ordered, immutable record of a whole paste or move run.

    Outcomes appear in store order, one per stored entry (duplicates
    included).
    """

    target: str
    mode: PasteMode
    outcomes: tuple[PasteOutcome, ...]

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.succeeded

    @property
    def bytes_copied(self) -> int:
        return sum(outcome.bytes_copied for outcome in self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)

    def __bool__(self) -> bool:
        return len(self.outcomes) > 0
