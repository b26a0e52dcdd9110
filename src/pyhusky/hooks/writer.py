# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem primitives used to persist hook scripts."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import Final

from ..errors import HookWriteError

DEFAULT_MODE: Final[int] = 0o644
EXECUTABLE_BITS: Final[int] = 0o555


def _target_mode(destination: Path) -> int:
    try:
        base = stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        base = DEFAULT_MODE
    return base | EXECUTABLE_BITS


def _write_temporary(fd: int, content: bytes) -> None:
    try:
        handle = os.fdopen(fd, "wb")
    except OSError:
        os.close(fd)
        raise
    with handle:
        handle.write(content)
        handle.flush()
        os.fsync(handle.fileno())


def write_hook(destination: Path, content: bytes) -> None:
    """Atomically replace ``destination`` with executable ``content``.

    The script is written to a temporary file in the same directory, flushed,
    made executable and renamed over the destination, so readers observe either
    the previous file or the complete new one.

    Args:
        destination: Hook path inside the git hooks directory.
        content: Complete script bytes.

    Raises:
        HookWriteError: If any filesystem operation fails.
    """

    try:
        mode = _target_mode(destination)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent)
    except OSError as exc:
        raise HookWriteError(destination, exc) from exc

    tmp_path = Path(tmp_name)
    try:
        _write_temporary(fd, content)
        tmp_path.chmod(mode)
        os.replace(tmp_path, destination)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise HookWriteError(destination, exc) from exc


def remove_hook(destination: Path) -> None:
    """Delete ``destination``, treating an already missing file as success.

    Raises:
        HookWriteError: If the file exists but cannot be removed.
    """

    try:
        destination.unlink(missing_ok=True)
    except OSError as exc:
        raise HookWriteError(destination, exc) from exc


__all__ = ["remove_hook", "write_hook"]
