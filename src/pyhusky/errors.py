# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised by the hook installation engine."""

from __future__ import annotations

from pathlib import Path
from typing import Final

USER_HOOKS_NOT_FOUND_MESSAGE: Final[str] = (
    "User hooks directory is not found or no executable file is found in the directory"
)
EMPTY_USER_HOOK_MESSAGE: Final[str] = "User hook script is empty"


class ConfigError(ValueError):
    """Raised when the ``[tool.pyhusky]`` configuration is invalid."""


class HookInstallError(RuntimeError):
    """Base class for failures that abort a hook installation run."""


class GitDirNotFoundError(HookInstallError):
    """Raised when the project root is not inside a git checkout."""

    def __init__(self, root: Path) -> None:
        super().__init__(f"Git directory not found under {root}")
        self.root = root


class HookDirectoryError(HookInstallError):
    """Raised when the git directory or its hooks directory cannot be accessed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not access git directory {path}: {cause}")
        self.path = path
        self.cause = cause


class UserHooksNotFoundError(HookInstallError):
    """Raised when user-hooks mode finds no executable hook candidate."""

    def __init__(self, directory: Path) -> None:
        super().__init__(f"{USER_HOOKS_NOT_FOUND_MESSAGE}: {directory}")
        self.directory = directory


class EmptyUserHookError(HookInstallError):
    """Raised when a selected user hook script has no content."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{EMPTY_USER_HOOK_MESSAGE}: {path}")
        self.path = path


class HookWriteError(HookInstallError):
    """Raised when writing or removing a hook script fails."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Could not update hook {path}: {cause}")
        self.path = path
        self.cause = cause


__all__ = [
    "ConfigError",
    "EMPTY_USER_HOOK_MESSAGE",
    "EmptyUserHookError",
    "GitDirNotFoundError",
    "HookDirectoryError",
    "HookInstallError",
    "HookWriteError",
    "USER_HOOKS_NOT_FOUND_MESSAGE",
    "UserHooksNotFoundError",
]
