"""Infrastructure layer — the store file and the local filesystem.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~file_clip.exceptions.FileClipError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from file_clip.infra.filesystem import LocalFileSystem, copy_tree, remove_any
from file_clip.infra.store import STORE_FILENAME, FileStore, home_directory, store_path

__all__: list[str] = [
    "STORE_FILENAME",
    "FileStore",
    "LocalFileSystem",
    "copy_tree",
    "home_directory",
    "remove_any",
    "store_path",
]
