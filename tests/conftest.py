"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import stat
from pathlib import Path
from types import SimpleNamespace

import pytest


class FakeDirEntry:
    """Stand-in for ``os.DirEntry`` with injectable metadata failures.

    Args:
        name: Entry name as returned by enumeration.
        mode: ``st_mode`` reported by the type query.
        rdev: ``st_rdev`` reported by the metadata read.
        path: Entry path (defaults to ``/fake/<name>``).
        stat_error: Raised by every ``stat()`` call.
        rdev_error: Raised by every ``stat()`` call after the first one,
            i.e. by the device metadata read but not the type query.
    """

    def __init__(
        self,
        name: str,
        *,
        mode: int = stat.S_IFREG | 0o644,
        rdev: int = 0,
        path: str | None = None,
        stat_error: OSError | None = None,
        rdev_error: OSError | None = None,
    ) -> None:
        self.name = name
        self.path = path if path is not None else f"/fake/{name}"
        self._mode = mode
        self._rdev = rdev
        self._stat_error = stat_error
        self._rdev_error = rdev_error
        self.stat_calls: list[bool] = []

    def stat(self, *, follow_symlinks: bool = True) -> SimpleNamespace:
        self.stat_calls.append(follow_symlinks)
        if self._stat_error is not None:
            raise self._stat_error
        if self._rdev_error is not None and len(self.stat_calls) > 1:
            raise self._rdev_error
        return SimpleNamespace(st_mode=self._mode, st_rdev=self._rdev)


@pytest.fixture
def fake_entry() -> type[FakeDirEntry]:
    """Factory for fake raw directory entries."""
    return FakeDirEntry


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory with two subdirectories, two files and a symlink.

    Layout::

        beta/
        Alpha/
        .hidden
        zeta.txt
        link -> zeta.txt
    """
    (tmp_path / "beta").mkdir()
    (tmp_path / "Alpha").mkdir()
    (tmp_path / ".hidden").write_text("x", encoding="utf-8")
    (tmp_path / "zeta.txt").write_text("x", encoding="utf-8")
    (tmp_path / "link").symlink_to("zeta.txt")
    return tmp_path
