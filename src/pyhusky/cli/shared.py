# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass

from ..logging import fail as core_fail
from ..logging import ok as core_ok


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(frozen=True, slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference."""

    return CLILogger(use_emoji=emoji)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
