# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render hook scripts from the enabled feature set."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .features import FeatureSet, HookCommand
from .models import GeneratedScript
from .registry import HookName

RUNNER: Final[tuple[str, ...]] = ("uv", "run")
WORKSPACE_FLAG: Final[str] = "--all-packages"

COMMAND_ARGS: Final[Mapping[HookCommand, tuple[str, ...]]] = MappingProxyType(
    {
        HookCommand.TEST: ("pytest",),
        HookCommand.CHECK: ("mypy", "."),
        HookCommand.LINT: ("ruff", "check", "."),
        HookCommand.FMT: ("ruff", "format", "--check", "."),
    },
)


def command_line(command: HookCommand, *, run_for_all: bool) -> str:
    """Return the shell line executing ``command``.

    Args:
        command: Command to render.
        run_for_all: When ``True`` run the command across every workspace member.

    Returns:
        str: Shell command such as ``uv run pytest`` or ``uv run --all-packages pytest``.
    """

    parts = [*RUNNER]
    if run_for_all:
        parts.append(WORKSPACE_FLAG)
    parts.extend(COMMAND_ARGS[command])
    return " ".join(parts)


def render_hook(features: FeatureSet, hook: HookName, version: str) -> GeneratedScript | None:
    """Return the generated script for ``hook`` or ``None`` when nothing applies.

    ``None`` is returned when user hooks replace generated scripts, when
    ``hook`` is not selected, or when no command is enabled.

    Args:
        features: Active feature selection.
        hook: Hook name being rendered.
        version: pyhusky version recorded in the banner.

    Returns:
        GeneratedScript | None: Script to install, or ``None`` for nothing to generate.
    """

    if features.user_hooks or hook not in features.hooks:
        return None
    commands = tuple(
        command_line(command, run_for_all=features.run_for_all) for command in features.enabled_commands()
    )
    if not commands:
        return None
    return GeneratedScript(hook=hook, commands=commands, version=version)


__all__ = ["COMMAND_ARGS", "command_line", "render_hook"]
