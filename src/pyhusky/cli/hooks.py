# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command for installing git hooks."""

from __future__ import annotations

from pathlib import Path

import typer

from ._hooks_cli_models import DRY_RUN_OPTION, EMOJI_OPTION, ROOT_OPTION, HookCLIOptions
from ._hooks_cli_services import emit_hooks_summary, perform_installation
from .shared import CLIError, build_cli_logger

hooks_app = typer.Typer(
    name="install-hooks",
    help="Install git hooks configured in [tool.pyhusky].",
    invoke_without_command=True,
    add_completion=False,
)


@hooks_app.callback(invoke_without_command=True)
def main(
    root: ROOT_OPTION = Path("."),
    dry_run: DRY_RUN_OPTION = False,
    emoji: EMOJI_OPTION = True,
) -> None:
    """Install pyhusky git hooks for the repository at ``root``.

    Raises:
        typer.Exit: Always raised to terminate the command with an exit status.
    """

    options = HookCLIOptions.from_cli(root, dry_run=dry_run, emoji=emoji)
    logger = build_cli_logger(emoji=options.emoji)
    try:
        result = perform_installation(options, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc

    emit_hooks_summary(result, options, logger=logger)
    raise typer.Exit(code=0)


__all__ = ["hooks_app"]
