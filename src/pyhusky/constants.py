# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants describing pyhusky's on-disk conventions."""

from __future__ import annotations

from typing import Final

TOOL_NAME: Final[str] = "pyhusky"
HOMEPAGE: Final[str] = "https://github.com/pyhusky/pyhusky"

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "pyhusky"

USER_HOOKS_DIRNAME: Final[str] = ".pyhusky"
USER_HOOKS_SUBDIR: Final[str] = "hooks"

GIT_DIRNAME: Final[str] = ".git"
GIT_HOOKS_SUBDIR: Final[str] = "hooks"

DONT_INSTALL_ENV: Final[str] = "PYHUSKY_DONT_INSTALL_HOOKS"

SHEBANG: Final[str] = "#!/bin/sh"
BANNER_TEMPLATE: Final[str] = "# This hook was set by {tool} v{version}: {homepage}"

__all__ = [
    "BANNER_TEMPLATE",
    "DONT_INSTALL_ENV",
    "GIT_DIRNAME",
    "GIT_HOOKS_SUBDIR",
    "HOMEPAGE",
    "PYPROJECT_FILENAME",
    "PYPROJECT_SECTION_KEY",
    "PYPROJECT_TOOL_KEY",
    "SHEBANG",
    "TOOL_NAME",
    "USER_HOOKS_DIRNAME",
    "USER_HOOKS_SUBDIR",
]
