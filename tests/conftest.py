"""Shared pytest fixtures and configuration for the file-clip test suite.

Guidelines
----------
* No test may touch the real home directory or the real store.
* Core service tests use in-memory fakes (``MagicMock``) for the
  protocols.
* Infra and CLI tests work inside ``tmp_path`` only.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from file_clip.infra.store import STORE_FILENAME


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a fresh temporary directory."""
    fake_home = tmp_path / "home"
    fake_home.mkdir()
    monkeypatch.setenv("HOME", str(fake_home))
    monkeypatch.setenv("USERPROFILE", str(fake_home))
    return fake_home


@pytest.fixture
def store_file(home: Path) -> Path:
    """Location of the store inside the fake home directory."""
    return home / STORE_FILENAME


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A scratch directory for source trees and paste targets."""
    path = tmp_path / "work"
    path.mkdir()
    return path
