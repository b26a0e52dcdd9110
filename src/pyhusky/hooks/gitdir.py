# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate the git directory and hooks directory of a project."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..constants import GIT_DIRNAME, GIT_HOOKS_SUBDIR
from ..errors import GitDirNotFoundError, HookDirectoryError

_GITDIR_PREFIX: Final[str] = "gitdir:"
_COMMONDIR_FILE: Final[str] = "commondir"


def _read_pointer(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise HookDirectoryError(path, exc) from exc


def _git_dir_at(directory: Path) -> Path | None:
    dot_git = directory / GIT_DIRNAME
    if dot_git.is_dir():
        return dot_git
    if dot_git.is_file():
        for line in _read_pointer(dot_git).splitlines():
            if line.startswith(_GITDIR_PREFIX):
                pointer = Path(line[len(_GITDIR_PREFIX) :].strip())
                git_dir = pointer if pointer.is_absolute() else (directory / pointer)
                if git_dir.is_dir():
                    return git_dir.resolve()
    return None


def resolve_git_dir(root: Path) -> Path:
    """Return the git directory for ``root`` or its nearest enclosing checkout.

    ``root`` may be a workspace member below the repository root, so parent
    directories are searched as git does. ``.git`` may be a directory or, for
    worktrees and submodules, a file containing a ``gitdir: <path>`` pointer.

    Args:
        root: Project root directory.

    Returns:
        Path: Resolved git directory.

    Raises:
        GitDirNotFoundError: If no usable git directory exists.
        HookDirectoryError: If a ``.git`` pointer file cannot be read.
    """

    start = root.absolute()
    for directory in (start, *start.parents):
        git_dir = _git_dir_at(directory)
        if git_dir is not None:
            return git_dir
    raise GitDirNotFoundError(root)


def resolve_hooks_dir(root: Path) -> Path:
    """Return ``<git-dir>/hooks``, creating it when git left it out.

    Linked worktrees share the hooks of the main repository, which their git
    directory names in a ``commondir`` file.

    Raises:
        GitDirNotFoundError: If no usable git directory exists.
        HookDirectoryError: If the git metadata cannot be read or the hooks
            directory cannot be created.
    """

    git_dir = resolve_git_dir(root)
    commondir = git_dir / _COMMONDIR_FILE
    if commondir.is_file():
        git_dir = (git_dir / _read_pointer(commondir).strip()).resolve()
    hooks_dir = git_dir / GIT_HOOKS_SUBDIR
    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise HookDirectoryError(hooks_dir, exc) from exc
    return hooks_dir


__all__ = ["resolve_git_dir", "resolve_hooks_dir"]
