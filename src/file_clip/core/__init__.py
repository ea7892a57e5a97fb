"""Core / service layer — pure orchestration and value objects.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O — only through the protocols in ``core.protocols``.
* No imports from ``cli`` or ``infra``.
"""

from file_clip.core.clip_service import ClipService
from file_clip.core.models import (
    ClipOutcome,
    ClipStatus,
    PasteMode,
    PasteOutcome,
    PasteReport,
    PasteStatus,
)
from file_clip.core.paste_service import PasteService
from file_clip.core.protocols import FileSystem, PathStore

__all__: list[str] = [
    "ClipOutcome",
    "ClipService",
    "ClipStatus",
    "FileSystem",
    "PasteMode",
    "PasteOutcome",
    "PasteReport",
    "PasteService",
    "PasteStatus",
    "PathStore",
]
