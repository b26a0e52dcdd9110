# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dataclasses describing hook scripts and installation outcomes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from packaging.version import Version

from ..constants import SHEBANG
from .banner import banner_line
from .registry import HookName


@dataclass(frozen=True, slots=True)
class GeneratedScript:
    """Hook script rendered from the active feature set."""

    hook: HookName
    commands: tuple[str, ...]
    version: str

    def lines(self) -> tuple[str, ...]:
        """Return the script lines: shebang, blank line, banner, then commands."""

        return (SHEBANG, "", banner_line(self.version), *self.commands)

    def render(self) -> str:
        """Return the full script text terminated by a newline."""

        return "\n".join(self.lines()) + "\n"

    def to_bytes(self) -> bytes:
        return self.render().encode("utf-8")


@dataclass(frozen=True, slots=True)
class Absent:
    """No file exists at the hook path."""


@dataclass(frozen=True, slots=True)
class ForeignUnrecognized:
    """A hook file exists but carries no pyhusky banner on its third line."""


@dataclass(frozen=True, slots=True)
class OwnedWithVersion:
    """A hook file written by pyhusky ``version``."""

    version: Version


ScriptClassification = Absent | ForeignUnrecognized | OwnedWithVersion


@dataclass(frozen=True, slots=True)
class InstalledScriptRecord:
    """Hook script found on disk, reconstructed on every run."""

    hook: HookName
    path: Path
    content: bytes
    version: Version | None = None


@dataclass(frozen=True, slots=True)
class UserHookSource:
    """Executable user hook scripts discovered for a project."""

    directory: Path
    candidates: Mapping[HookName, Path] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", MappingProxyType(dict(self.candidates)))

class HookAction(str, Enum):
    """Decision taken by the installer for a single hook name."""

    INSTALL = "install"
    UPDATE = "update"
    REMOVE = "remove"
    SKIP_FOREIGN = "skip-foreign"
    UNCHANGED = "unchanged"
    NOTHING = "nothing"


@dataclass(slots=True)
class InstallResult:
    """Aggregate outcome from reconciling every hook name."""

    installed: list[Path] = field(default_factory=list)
    updated: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    dry_run: bool = False

    def record(self, action: HookAction, path: Path) -> None:
        """Append ``path`` to the bucket matching ``action``."""

        bucket = {
            HookAction.INSTALL: self.installed,
            HookAction.UPDATE: self.updated,
            HookAction.REMOVE: self.removed,
            HookAction.SKIP_FOREIGN: self.skipped,
            HookAction.UNCHANGED: self.unchanged,
        }.get(action)
        if bucket is not None:
            bucket.append(path)

    @property
    def changed(self) -> bool:
        return bool(self.installed or self.updated or self.removed)


__all__ = [
    "Absent",
    "ForeignUnrecognized",
    "GeneratedScript",
    "HookAction",
    "InstallResult",
    "InstalledScriptRecord",
    "OwnedWithVersion",
    "ScriptClassification",
    "UserHookSource",
]
