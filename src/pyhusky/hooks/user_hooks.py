# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discover and stamp user-supplied hook scripts under ``.pyhusky/``."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from ..constants import USER_HOOKS_DIRNAME, USER_HOOKS_SUBDIR
from ..errors import EmptyUserHookError, UserHooksNotFoundError
from .banner import BANNER_LINE_INDEX, banner_line
from .models import UserHookSource
from .registry import HookName, lookup_hook

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def user_hooks_directory(root: Path) -> Path:
    """Return ``.pyhusky/hooks`` when present, otherwise ``.pyhusky`` itself."""

    base = root / USER_HOOKS_DIRNAME
    nested = base / USER_HOOKS_SUBDIR
    return nested if nested.is_dir() else base


def is_executable(path: Path) -> bool:
    """Return whether ``path`` carries an execute permission bit.

    Windows has no execute bit, so every regular file qualifies there.
    """

    if os.name == "nt":
        return True
    return bool(path.stat().st_mode & _EXECUTE_BITS)


def discover_user_hooks(root: Path) -> UserHookSource:
    """Return the executable hook candidates found under ``root``.

    Args:
        root: Project root containing the ``.pyhusky`` directory.

    Returns:
        UserHookSource: Candidate script per hook name.

    Raises:
        UserHooksNotFoundError: If the directory is missing or holds no
            executable file named after a git hook.
    """

    directory = user_hooks_directory(root)
    if not directory.is_dir():
        raise UserHooksNotFoundError(directory)

    candidates: dict[HookName, Path] = {}
    for entry in sorted(directory.iterdir()):
        hook = lookup_hook(entry.name)
        if hook is None or not entry.is_file() or not is_executable(entry):
            continue
        candidates[hook] = entry
    if not candidates:
        raise UserHooksNotFoundError(directory)
    return UserHookSource(directory=directory, candidates=candidates)


def _terminated(line: bytes) -> bytes:
    return line if line.endswith((b"\n", b"\r")) else line + b"\n"


def stamp_user_hook(content: bytes, version: str) -> bytes:
    """Return ``content`` with the pyhusky banner added.

    Scripts with at least two lines get the banner as their third line, the
    same place generated scripts carry it. Single-line scripts get the banner
    appended as a new last line.

    Args:
        content: Non-empty user script bytes.
        version: pyhusky version recorded in the banner.

    Returns:
        bytes: Script bytes ready to install.
    """

    banner = banner_line(version).encode("utf-8") + b"\n"
    lines = content.splitlines(keepends=True)
    if len(lines) >= BANNER_LINE_INDEX:
        head = lines[:BANNER_LINE_INDEX]
        head[-1] = _terminated(head[-1])
        return b"".join([*head, banner, *lines[BANNER_LINE_INDEX:]])
    return _terminated(content) + banner


def read_user_hook(path: Path, version: str) -> bytes:
    """Read and stamp the user hook at ``path``.

    Raises:
        EmptyUserHookError: If the script has zero bytes.
    """

    content = path.read_bytes()
    if not content:
        raise EmptyUserHookError(path)
    return stamp_user_hook(content, version)


def load_user_hooks(root: Path, version: str) -> dict[HookName, bytes]:
    """Discover, validate and stamp every user hook before anything is written.

    Args:
        root: Project root containing the ``.pyhusky`` directory.
        version: pyhusky version recorded in each banner.

    Returns:
        dict[HookName, bytes]: Stamped script content per hook name.

    Raises:
        UserHooksNotFoundError: If no usable hook exists.
        EmptyUserHookError: If a selected hook script is empty.
    """

    source = discover_user_hooks(root)
    return {hook: read_user_hook(path, version) for hook, path in source.candidates.items()}


__all__ = [
    "discover_user_hooks",
    "is_executable",
    "load_user_hooks",
    "read_user_hook",
    "stamp_user_hook",
    "user_hooks_directory",
]
