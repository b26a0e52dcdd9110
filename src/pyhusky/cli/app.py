# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

import typer

from .. import __version__
from .hooks import hooks_app

app = typer.Typer(help="Install and maintain git hooks for a project.", no_args_is_help=True)
app.add_typer(hooks_app, name="install-hooks")


@app.command("version")
def version() -> None:
    """Print the installed pyhusky version."""

    typer.echo(__version__)


__all__ = ["app"]
