# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Recognise hook scripts previously written by pyhusky."""

from __future__ import annotations

from pathlib import Path

from packaging.version import InvalidVersion, Version

from .banner import BANNER_LINE_INDEX, BANNER_PATTERN
from .models import Absent, ForeignUnrecognized, InstalledScriptRecord, OwnedWithVersion, ScriptClassification
from .registry import HookName


def parse_banner_version(content: bytes) -> Version | None:
    """Return the version recorded on the banner line of ``content``.

    Args:
        content: Raw script bytes.

    Returns:
        Version | None: Parsed version, or ``None`` when the third line is not a
        pyhusky banner or the version cannot be parsed.
    """

    lines = content.splitlines()
    if len(lines) <= BANNER_LINE_INDEX:
        return None
    try:
        line = lines[BANNER_LINE_INDEX].decode("utf-8")
    except UnicodeDecodeError:
        return None
    match = BANNER_PATTERN.match(line)
    if match is None:
        return None
    try:
        return Version(match.group("version"))
    except InvalidVersion:
        return None


def classify(content: bytes | None) -> ScriptClassification:
    """Classify an existing hook script.

    Args:
        content: Raw file content, or ``None`` when no file exists.

    Returns:
        ScriptClassification: ``Absent``, ``ForeignUnrecognized`` or ``OwnedWithVersion``.
    """

    if content is None:
        return Absent()
    version = parse_banner_version(content)
    if version is None:
        return ForeignUnrecognized()
    return OwnedWithVersion(version)


def classify_record(record: InstalledScriptRecord | None) -> ScriptClassification:
    """Classify a record returned by :func:`load_installed` using its parsed banner."""

    if record is None:
        return Absent()
    if record.version is None:
        return ForeignUnrecognized()
    return OwnedWithVersion(record.version)


def load_installed(path: Path, hook: HookName) -> InstalledScriptRecord | None:
    """Read the hook script at ``path`` if one exists.

    Args:
        path: Destination path inside the git hooks directory.
        hook: Hook name the path belongs to.

    Returns:
        InstalledScriptRecord | None: Record of the file on disk, or ``None`` when absent.
    """

    try:
        content = path.read_bytes()
    except FileNotFoundError:
        return None
    return InstalledScriptRecord(hook=hook, path=path, content=content, version=parse_banner_version(content))


__all__ = ["classify", "classify_record", "load_installed", "parse_banner_version"]
