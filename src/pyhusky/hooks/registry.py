# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry helpers describing the git hooks pyhusky can manage."""

from __future__ import annotations

from enum import Enum


class HookName(str, Enum):
    """Git hook names in the order they are processed during installation."""

    APPLYPATCH_MSG = "applypatch-msg"
    PRE_APPLYPATCH = "pre-applypatch"
    POST_APPLYPATCH = "post-applypatch"
    PRE_COMMIT = "pre-commit"
    PRE_MERGE_COMMIT = "pre-merge-commit"
    PREPARE_COMMIT_MSG = "prepare-commit-msg"
    COMMIT_MSG = "commit-msg"
    POST_COMMIT = "post-commit"
    PRE_REBASE = "pre-rebase"
    POST_CHECKOUT = "post-checkout"
    POST_MERGE = "post-merge"
    PRE_PUSH = "pre-push"
    REFERENCE_TRANSACTION = "reference-transaction"
    PRE_AUTO_GC = "pre-auto-gc"
    POST_REWRITE = "post-rewrite"
    SENDEMAIL_VALIDATE = "sendemail-validate"
    FSMONITOR_WATCHMAN = "fsmonitor-watchman"
    POST_INDEX_CHANGE = "post-index-change"

    def __str__(self) -> str:
        return self.value


_HOOKS_BY_NAME: dict[str, HookName] = {hook.value: hook for hook in HookName}


def available_hooks() -> tuple[HookName, ...]:
    """Return every supported hook name in processing order."""

    return tuple(HookName)


def lookup_hook(name: str) -> HookName | None:
    """Return the :class:`HookName` matching ``name`` or ``None``."""

    return _HOOKS_BY_NAME.get(name)


__all__ = [
    "HookName",
    "available_hooks",
    "lookup_hook",
]
