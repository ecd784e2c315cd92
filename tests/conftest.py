# tests/conftest.py
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List

import pytest

# --- FORCE PROJECT ROOT ONTO sys.path ----------------------------------------

# Project root = parent of the "tests" directory
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def temp_root(tmp_path, monkeypatch) -> Path:
    """
    Per-test: make TEMP the highest-priority candidate root and point it at a
    private directory, so nothing lands in the real /tmp and every test can
    count what it created.
    """
    root = tmp_path / "root"
    root.mkdir()
    monkeypatch.setenv("TEMP", str(root))
    monkeypatch.delenv("TMP", raising=False)
    monkeypatch.delenv("TMPDIR", raising=False)
    return root


class FailingFilesystem:
    """Every create is rejected, as if no candidate root were writable."""

    def __init__(self) -> None:
        self.make_calls: List[str] = []

    def make_directory(self, path) -> bool:
        self.make_calls.append(str(path))
        return False

    def make_file(self, path) -> bool:
        self.make_calls.append(str(path))
        return False

    def remove_file(self, path) -> bool:
        return False

    def remove_tree(self, path) -> bool:
        return False

    def exists(self, path) -> bool:
        return False

    def is_directory(self, path) -> bool:
        return False

    def list_files(self, path):
        return []


@pytest.fixture
def failing_fs() -> FailingFilesystem:
    return FailingFilesystem()
