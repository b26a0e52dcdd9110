# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour and emoji support."""

from __future__ import annotations

from rich.text import Text

from .console import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    use_color: bool | None = None,
) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled, emoji=use_emoji)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an informational message."""

    prefix = emoji("ℹ️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="cyan", use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a success message."""

    prefix = emoji("✅ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="green", use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit a warning message."""

    prefix = emoji("⚠️ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="yellow", use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Emit an error message."""

    prefix = emoji("❌ ", use_emoji)
    _print_line(f"{prefix}{msg}", style="red", use_emoji=use_emoji, use_color=use_color)


__all__ = ["emoji", "fail", "info", "ok", "warn"]
