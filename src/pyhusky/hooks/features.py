# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Feature flags selecting which hooks and commands pyhusky generates."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Final

from ..errors import ConfigError
from .registry import HookName


class HookCommand(str, Enum):
    """Commands that can be embedded in a generated hook script.

    Member order is the order commands appear in a rendered script.
    """

    TEST = "test"
    CHECK = "check"
    LINT = "lint"
    FMT = "fmt"


RUN_FOR_ALL_FEATURE: Final[str] = "run-for-all"
USER_HOOKS_FEATURE: Final[str] = "user-hooks"

COMMAND_FEATURES: Final[Mapping[str, HookCommand]] = MappingProxyType(
    {
        "run-test": HookCommand.TEST,
        "run-check": HookCommand.CHECK,
        "run-lint": HookCommand.LINT,
        "run-fmt": HookCommand.FMT,
    },
)
HOOK_FEATURES: Final[Mapping[str, HookName]] = MappingProxyType(
    {
        "prepush-hook": HookName.PRE_PUSH,
        "precommit-hook": HookName.PRE_COMMIT,
        "postmerge-hook": HookName.POST_MERGE,
    },
)
KNOWN_FEATURES: Final[frozenset[str]] = frozenset(
    {*COMMAND_FEATURES, *HOOK_FEATURES, RUN_FOR_ALL_FEATURE, USER_HOOKS_FEATURE},
)
DEFAULT_FEATURES: Final[tuple[str, ...]] = (RUN_FOR_ALL_FEATURE, "prepush-hook", "run-test")


def _freeze_commands(commands: Mapping[HookCommand, bool]) -> Mapping[HookCommand, bool]:
    return MappingProxyType({command: bool(commands.get(command, False)) for command in HookCommand})


@dataclass(frozen=True, slots=True)
class FeatureSet:
    """Immutable view of the features enabled for a single installation run."""

    commands: Mapping[HookCommand, bool] = field(default_factory=dict)
    hooks: frozenset[HookName] = frozenset()
    run_for_all: bool = False
    user_hooks: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "commands", _freeze_commands(self.commands))
        object.__setattr__(self, "hooks", frozenset(self.hooks))

    @classmethod
    def from_features(cls, features: Iterable[str]) -> FeatureSet:
        """Build a feature set from feature names such as ``run-test``.

        Args:
            features: Feature names collected from configuration.

        Returns:
            FeatureSet: Resolved, read-only feature selection.

        Raises:
            ConfigError: If a feature name is not recognised.
        """

        names = set(features)
        unknown = sorted(names - KNOWN_FEATURES)
        if unknown:
            known = ", ".join(sorted(KNOWN_FEATURES))
            raise ConfigError(f"Unknown pyhusky feature(s): {', '.join(unknown)} (known: {known})")
        return cls(
            commands={command: feature in names for feature, command in COMMAND_FEATURES.items()},
            hooks=frozenset(hook for feature, hook in HOOK_FEATURES.items() if feature in names),
            run_for_all=RUN_FOR_ALL_FEATURE in names,
            user_hooks=USER_HOOKS_FEATURE in names,
        )

    def enabled_commands(self) -> tuple[HookCommand, ...]:
        """Return enabled commands in rendering order."""

        return tuple(command for command in HookCommand if self.commands[command])


__all__ = [
    "COMMAND_FEATURES",
    "DEFAULT_FEATURES",
    "FeatureSet",
    "HOOK_FEATURES",
    "HookCommand",
    "KNOWN_FEATURES",
    "RUN_FOR_ALL_FEATURE",
    "USER_HOOKS_FEATURE",
]
