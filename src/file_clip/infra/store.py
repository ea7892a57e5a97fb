"""Infrastructure: the on-disk store of clipped paths.

The store is a UTF-8 text file at ``~/.clip_store`` holding one absolute
path per newline-terminated line.  It is only ever appended to, and it
is cleared by deleting the file outright.

Rules
-----
* The location is re-derived from the home directory on every
  operation; it is never cached at module level.
* Every ``OSError`` is re-raised as :class:`StoreError`.
* No ``print()`` — callers handle user-facing output.
* No locking: concurrent invocations are not synchronised.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from file_clip.exceptions import HomeDirectoryError, StoreError

logger = logging.getLogger(__name__)

STORE_FILENAME: str = ".clip_store"
"""Hidden file name of the store inside the home directory."""


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------

def home_directory() -> Path:
    """Return the current user's home directory.

    Raises
    ------
    HomeDirectoryError
        When the platform cannot tell where home is.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirectoryError(
            f"Could not determine the home directory: {exc}",
            hint="Set the HOME environment variable.",
        ) from exc


def store_path() -> Path:
    """Return ``<home>/.clip_store``."""
    return home_directory() / STORE_FILENAME


# ---------------------------------------------------------------------------
# Store adapter
# ---------------------------------------------------------------------------

class FileStore:
    """Concrete :class:`~file_clip.core.protocols.PathStore` on a text file.

    Parameters
    ----------
    path:
        Explicit store location.  When ``None`` (default), the location
        is derived from the home directory each time it is needed.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path: Path | None = path

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return store_path()

    def append(self, paths: Sequence[str]) -> None:
        """Append *paths*, creating the store if needed."""
        path = self.path
        try:
            with path.open("a", encoding="utf-8", newline="\n") as handle:
                for entry in paths:
                    handle.write(f"{entry}\n")
        except OSError as exc:
            raise StoreError(
                f"Could not add paths to {path}: {exc}",
            ) from exc
        logger.debug("STORE | appended %d path(s) to %s", len(paths), path)

    def read(self) -> tuple[str, ...]:
        """Return stored paths in file order; a missing store is empty."""
        path = self.path
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("STORE | %s does not exist, nothing clipped", path)
            return ()
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Could not read {path}: {exc}") from exc
        # Blank lines are not entries; list and paste both skip them.
        return tuple(line for line in text.split("\n") if line)

    def erase(self) -> bool:
        """Delete the store file; a missing store is a no-op."""
        path = self.path
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        except OSError as exc:
            raise StoreError(f"Could not clear store path: {exc}") from exc
        logger.info("DELETE | %s", path)
        return True
