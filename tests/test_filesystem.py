"""Tests for the local filesystem adapter (infra/filesystem.py).

Coverage:
* Single files land in the target under their base name.
* Directories are recreated as ``<target>/<basename>`` with identical
  structure and content.
* Existing destination files are overwritten; a directory in the way
  is an error, and a link in the way is replaced rather than followed.
* Symbolic links inside a tree are recreated as links.
* Copying a directory into itself is refused.
* Removal of files and trees, and error mapping to ``TransferError``.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from file_clip.exceptions import TransferError
from file_clip.infra.filesystem import LocalFileSystem, copy_tree, remove_any


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_tree(root: Path) -> Path:
    """Build ``root/project`` with nested files and an empty directory."""
    project = root / "project"
    (project / "src" / "pkg").mkdir(parents=True)
    (project / "empty").mkdir()
    (project / "README").write_text("readme", encoding="utf-8")
    (project / "src" / "main.py").write_text("print('hi')\n", encoding="utf-8")
    (project / "src" / "pkg" / "data.bin").write_bytes(bytes(range(256)))
    return project


def _snapshot(root: Path) -> dict[str, bytes | None]:
    """Relative path -> contents (``None`` for directories)."""
    result: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_bytes()
    return result


# ---------------------------------------------------------------------------
# copy_tree
# ---------------------------------------------------------------------------

class TestCopyTree:
    def test_file_is_copied_under_its_base_name(self, workspace: Path) -> None:
        source = workspace / "a.txt"
        source.write_text("hi", encoding="utf-8")
        target = workspace / "out"
        target.mkdir()

        copied = copy_tree(source, target)

        assert (target / "a.txt").read_text(encoding="utf-8") == "hi"
        assert copied == 2
        assert source.exists()

    def test_directory_is_recreated_under_target(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        target = workspace / "out"
        target.mkdir()

        copied = copy_tree(project, target)

        assert _snapshot(target / "project") == _snapshot(project)
        assert (target / "project" / "empty").is_dir()
        assert copied == len("readme") + len("print('hi')\n") + 256

    def test_existing_file_is_overwritten(self, workspace: Path) -> None:
        source = workspace / "a.txt"
        source.write_text("new", encoding="utf-8")
        target = workspace / "out"
        target.mkdir()
        (target / "a.txt").write_text("old contents", encoding="utf-8")

        copy_tree(source, target)
        assert (target / "a.txt").read_text(encoding="utf-8") == "new"

    def test_existing_directory_is_merged_into(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        target = workspace / "out"
        (target / "project").mkdir(parents=True)
        (target / "project" / "keep.txt").write_text("keep", encoding="utf-8")

        copy_tree(project, target)

        assert (target / "project" / "keep.txt").read_text(encoding="utf-8") == "keep"
        assert (target / "project" / "README").exists()

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_symlinks_inside_tree_are_recreated(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        os.symlink("README", project / "link")
        target = workspace / "out"
        target.mkdir()

        copy_tree(project, target)

        copied_link = target / "project" / "link"
        assert copied_link.is_symlink()
        assert os.readlink(copied_link) == "README"

    def test_copy_into_itself_is_refused(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        inner = project / "src"

        with pytest.raises(OSError, match="into itself"):
            copy_tree(project, inner)
        assert not (inner / "project").exists()

    def test_permission_bits_are_kept(self, workspace: Path) -> None:
        source = workspace / "tool.sh"
        source.write_text("#!/bin/sh\n", encoding="utf-8")
        source.chmod(0o755)
        target = workspace / "out"
        target.mkdir()

        copy_tree(source, target)
        assert (target / "tool.sh").stat().st_mode & 0o777 == 0o755

    def test_directory_in_the_way_of_a_file_is_an_error(self, workspace: Path) -> None:
        source = workspace / "a.txt"
        source.write_text("hi", encoding="utf-8")
        target = workspace / "out"
        (target / "a.txt").mkdir(parents=True)

        with pytest.raises(IsADirectoryError):
            copy_tree(source, target)
        assert list((target / "a.txt").iterdir()) == []

    @pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges")
    def test_symlink_at_destination_is_replaced(self, workspace: Path) -> None:
        source = workspace / "a.txt"
        source.write_text("new", encoding="utf-8")
        elsewhere = workspace / "elsewhere.txt"
        elsewhere.write_text("untouched", encoding="utf-8")
        target = workspace / "out"
        target.mkdir()
        os.symlink(elsewhere, target / "a.txt")

        copy_tree(source, target)

        assert not (target / "a.txt").is_symlink()
        assert (target / "a.txt").read_text(encoding="utf-8") == "new"
        assert elsewhere.read_text(encoding="utf-8") == "untouched"


# ---------------------------------------------------------------------------
# remove_any
# ---------------------------------------------------------------------------

class TestRemoveAny:
    def test_removes_file(self, workspace: Path) -> None:
        path = workspace / "a.txt"
        path.write_text("x", encoding="utf-8")
        remove_any(path)
        assert not path.exists()

    def test_removes_tree(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        remove_any(project)
        assert not project.exists()


# ---------------------------------------------------------------------------
# LocalFileSystem
# ---------------------------------------------------------------------------

class TestLocalFileSystem:
    def test_canonicalize_is_absolute(
        self, workspace: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (workspace / "a.txt").write_text("x", encoding="utf-8")
        monkeypatch.chdir(workspace)
        fs = LocalFileSystem()
        assert fs.canonicalize("a.txt") == str((workspace / "a.txt").resolve())
        assert fs.canonicalize("./a.txt") == str((workspace / "a.txt").resolve())

    def test_exists_and_is_directory(self, workspace: Path) -> None:
        fs = LocalFileSystem()
        (workspace / "a.txt").write_text("x", encoding="utf-8")
        assert fs.exists(str(workspace / "a.txt"))
        assert not fs.exists(str(workspace / "missing"))
        assert fs.is_directory(str(workspace))
        assert not fs.is_directory(str(workspace / "a.txt"))

    def test_copy_into_maps_errors(self, workspace: Path) -> None:
        fs = LocalFileSystem()
        with pytest.raises(TransferError, match="Could not paste"):
            fs.copy_into(str(workspace / "missing.txt"), str(workspace))

    def test_remove_maps_errors(self, workspace: Path) -> None:
        fs = LocalFileSystem()
        with pytest.raises(TransferError, match="Could not remove file"):
            fs.remove(str(workspace / "missing.txt"))

    def test_copy_into_returns_bytes(self, workspace: Path) -> None:
        project = _make_tree(workspace)
        target = workspace / "out"
        target.mkdir()
        assert LocalFileSystem().copy_into(str(project), str(target)) > 0
