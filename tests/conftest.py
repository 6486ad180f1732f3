"""Shared test fixtures."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import List

import pytest

from fsfind.errors import DirectoryOpenError
from fsfind.walker import DirectoryHandle


@pytest.fixture(autouse=True)
def _clean_fsfind_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("FSFIND_RECURSE", "FSFIND_MAX_DEPTH", "FSFIND_DEBUG", "FSFIND_MATCH_MODE", "FSFIND_TARGET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Build ``a/x.txt``, ``a/b/y.txt``, ``a/b/c/z.txt`` and ``a/link -> a/b``."""

    root = tmp_path / "a"
    (root / "b" / "c").mkdir(parents=True)
    (root / "x.txt").write_text("x")
    (root / "b" / "y.txt").write_text("y")
    (root / "b" / "c" / "z.txt").write_text("z")
    os.symlink(root / "b", root / "link", target_is_directory=True)
    return root


class OpenRecorder:
    """Wraps ``DirectoryHandle.open`` to record every directory the walker opens."""

    def __init__(self, deny: tuple[str, ...] = ()) -> None:
        self.opened: List[str] = []
        self.handles: List[DirectoryHandle] = []
        self.deny = deny
        self._real_open = DirectoryHandle.open

    def __call__(self, path: str) -> DirectoryHandle:
        if os.path.basename(path) in self.deny:
            raise DirectoryOpenError(path, PermissionError(errno.EACCES, "Permission denied", path))
        handle = self._real_open(path)
        self.opened.append(path)
        self.handles.append(handle)
        return handle


@pytest.fixture()
def open_recorder(monkeypatch: pytest.MonkeyPatch) -> OpenRecorder:
    recorder = OpenRecorder()
    monkeypatch.setattr(DirectoryHandle, "open", staticmethod(recorder))
    return recorder


@pytest.fixture()
def make_open_recorder(monkeypatch: pytest.MonkeyPatch):
    def _make(*deny: str) -> OpenRecorder:
        recorder = OpenRecorder(deny=deny)
        monkeypatch.setattr(DirectoryHandle, "open", staticmethod(recorder))
        return recorder

    return _make
