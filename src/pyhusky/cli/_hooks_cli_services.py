# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helper services used by the git hooks CLI command."""

from __future__ import annotations

from ..config import resolve_feature_set
from ..errors import ConfigError, HookInstallError
from ..hooks import InstallResult, install_hooks
from ._hooks_cli_models import HookCLIOptions
from .shared import CLIError, CLILogger


def perform_installation(options: HookCLIOptions, *, logger: CLILogger) -> InstallResult:
    """Install hooks for the provided options.

    Args:
        options: Normalized CLI options containing paths and runtime flags.
        logger: Logger used to emit user-facing messages.

    Returns:
        The result reported by :func:`install_hooks`.

    Raises:
        CLIError: Raised when configuration is invalid or installation fails.
    """

    try:
        features = resolve_feature_set(options.root)
        return install_hooks(
            options.root,
            features,
            dry_run=options.dry_run,
            use_emoji=options.emoji,
        )
    except (ConfigError, HookInstallError) as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc


def emit_hooks_summary(
    result: InstallResult,
    options: HookCLIOptions,
    *,
    logger: CLILogger,
) -> None:
    """Emit summary lines after attempting hook installation.

    Args:
        result: The installation result from :func:`perform_installation`.
        options: CLI options controlling dry-run behaviour and emoji output.
        logger: Logger used to display the summary.
    """

    if not options.dry_run and not result.changed:
        logger.ok("Git hooks are up to date")


__all__ = ["emit_hooks_summary", "perform_installation"]
