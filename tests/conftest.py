# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

import pytest

_OLD_MTIME_NS = 1_000_000_000 * 10**9


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Return a project root containing an empty ``.git/hooks`` directory."""

    (tmp_path / ".git" / "hooks").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def hook_path(repo: Path) -> Callable[[str], Path]:
    def _hook_path(name: str) -> Path:
        return repo / ".git" / "hooks" / name

    return _hook_path


@pytest.fixture
def user_hook(repo: Path) -> Callable[..., Path]:
    """Return a helper writing ``.pyhusky/hooks/<name>`` user scripts."""

    def _write(name: str, content: str, *, executable: bool = True, nested: bool = True) -> Path:
        directory = repo / ".pyhusky" / "hooks" if nested else repo / ".pyhusky"
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        path.write_text(content, encoding="utf-8")
        path.chmod(0o755 if executable else 0o644)
        return path

    return _write


@pytest.fixture
def backdate() -> Callable[[Path], int]:
    """Return a helper moving a file's mtime into the past.

    Comparing against a backdated mtime detects rewrites without sleeping.
    """

    def _backdate(path: Path) -> int:
        os.utime(path, ns=(_OLD_MTIME_NS, _OLD_MTIME_NS))
        return path.stat().st_mtime_ns

    return _backdate
