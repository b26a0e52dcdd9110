# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data structures for the git hooks CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

ROOT_OPTION = Annotated[
    Path,
    typer.Option("--root", "-r", help="Repository root.", file_okay=False),
]
DRY_RUN_OPTION = Annotated[
    bool,
    typer.Option("--dry-run", help="Show actions without modifying files."),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji output."),
]


@dataclass(slots=True)
class HookCLIOptions:
    """Capture CLI options for hook installation."""

    root: Path
    dry_run: bool
    emoji: bool

    @classmethod
    def from_cli(cls, root: Path, *, dry_run: bool, emoji: bool) -> HookCLIOptions:
        """Return options parsed from CLI arguments."""

        return cls(root=root.resolve(), dry_run=dry_run, emoji=emoji)


__all__ = ["DRY_RUN_OPTION", "EMOJI_OPTION", "HookCLIOptions", "ROOT_OPTION"]
