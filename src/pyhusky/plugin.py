# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""pytest plugin installing git hooks whenever the project's tests run."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from .config import resolve_feature_set
from .constants import DONT_INSTALL_ENV
from .errors import ConfigError, GitDirNotFoundError, HookInstallError
from .hooks import InstallResult, install_hooks
from .logging import warn

_XDIST_WORKER_ENV = "PYTEST_XDIST_WORKER"


def install_for_session(root: Path, *, use_emoji: bool = False) -> InstallResult | None:
    """Install hooks for the project at ``root`` on behalf of a test session.

    Args:
        root: Root directory pytest resolved for the session.
        use_emoji: Whether console output may include emoji prefixes.

    Returns:
        InstallResult | None: Installation outcome, or ``None`` when skipped.

    Raises:
        pytest.UsageError: If configuration is invalid or installation fails.
    """

    if os.environ.get(DONT_INSTALL_ENV) or os.environ.get(_XDIST_WORKER_ENV):
        return None
    try:
        features = resolve_feature_set(root)
        return install_hooks(root, features, use_emoji=use_emoji)
    except GitDirNotFoundError as exc:
        warn(f"pyhusky: {exc}; hooks not installed", use_emoji=use_emoji)
        return None
    except (ConfigError, HookInstallError) as exc:
        raise pytest.UsageError(f"pyhusky: {exc}") from exc


def pytest_configure(config: pytest.Config) -> None:
    """Install or refresh git hooks before collection starts."""

    install_for_session(Path(config.rootpath))


__all__ = ["install_for_session", "pytest_configure"]
