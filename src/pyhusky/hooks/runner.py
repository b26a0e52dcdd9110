# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reconcile the git hooks directory with the active feature set."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from packaging.version import Version

from .. import __version__
from ..errors import HookWriteError
from ..logging import info, ok, warn
from .classifier import classify_record, load_installed
from .features import FeatureSet
from .gitdir import resolve_hooks_dir
from .models import (
    Absent,
    ForeignUnrecognized,
    HookAction,
    InstallResult,
    OwnedWithVersion,
    ScriptClassification,
)
from .registry import HookName, available_hooks
from .renderer import render_hook
from .user_hooks import load_user_hooks
from .writer import remove_hook, write_hook

_VERBS: dict[HookAction, str] = {
    HookAction.INSTALL: "install",
    HookAction.UPDATE: "update",
    HookAction.REMOVE: "remove stale",
}


@dataclass(frozen=True, slots=True)
class HookPlan:
    """Decision taken for a single hook name."""

    hook: HookName
    path: Path
    action: HookAction
    content: bytes | None = None


def decide_action(existing: ScriptClassification, desired: bytes | None, current: Version) -> HookAction:
    """Return the action reconciling ``existing`` with ``desired`` content.

    A foreign script is never touched. It only counts as a conflict when this
    run has content of its own for that hook.

    Args:
        existing: Classification of the file currently at the hook path.
        desired: Content this run wants installed, or ``None`` for nothing.
        current: Version of the running pyhusky.

    Returns:
        HookAction: Action the installer should apply.
    """

    match existing:
        case Absent():
            return HookAction.NOTHING if desired is None else HookAction.INSTALL
        case ForeignUnrecognized():
            return HookAction.NOTHING if desired is None else HookAction.SKIP_FOREIGN
        case OwnedWithVersion(version=version) if version < current:
            return HookAction.REMOVE if desired is None else HookAction.UPDATE
        case OwnedWithVersion():
            # Same version, or written by a newer pyhusky.
            return HookAction.UNCHANGED
    raise TypeError(f"Unsupported script classification: {existing!r}")


def plan_hook(
    hook: HookName,
    *,
    hooks_dir: Path,
    desired: bytes | None,
    current: Version,
) -> HookPlan:
    """Load the existing script for ``hook`` and decide what to do with it."""

    path = hooks_dir / hook.value
    try:
        record = load_installed(path, hook)
    except OSError as exc:
        raise HookWriteError(path, exc) from exc
    action = decide_action(classify_record(record), desired, current)
    return HookPlan(hook=hook, path=path, action=action, content=desired)


def apply_plan(plan: HookPlan, *, dry_run: bool, use_emoji: bool) -> None:
    """Perform the filesystem change described by ``plan``."""

    if plan.action not in _VERBS:
        return
    verb = _VERBS[plan.action]
    message = f"would {verb} {plan.hook} hook" if dry_run else f"{verb} {plan.hook} hook"
    info(message.capitalize(), use_emoji=use_emoji)
    if dry_run:
        return
    if plan.action is HookAction.REMOVE:
        remove_hook(plan.path)
    elif plan.content is not None:
        write_hook(plan.path, plan.content)


def _summarise(result: InstallResult, hooks_dir: Path, *, use_emoji: bool) -> None:
    if result.skipped:
        foreign = ", ".join(path.name for path in result.skipped)
        warn(f"Left hooks not installed by pyhusky untouched: {foreign}", use_emoji=use_emoji)
    counts = (
        ("installed", result.installed),
        ("updated", result.updated),
        ("removed", result.removed),
    )
    changes = ", ".join(f"{label} {len(paths)}" for label, paths in counts if paths)
    if result.dry_run:
        ok(f"Dry run complete: would have {changes or 'changed nothing'}", use_emoji=use_emoji)
    elif changes:
        ok(f"Hooks in {hooks_dir}: {changes}", use_emoji=use_emoji)


def install_hooks(
    root: Path,
    features: FeatureSet,
    *,
    version: str | None = None,
    dry_run: bool = False,
    use_emoji: bool = True,
) -> InstallResult:
    """Install, refresh or remove git hooks to match ``features``.

    Every hook name is processed independently in :class:`HookName` order. In
    user-hooks mode all user scripts are validated before anything is written.
    Hooks written before a failure are kept.

    Args:
        root: Project root whose hooks should be managed.
        features: Resolved feature selection.
        version: Version recorded in banners; defaults to the installed pyhusky version.
        dry_run: When ``True`` report decisions without touching the filesystem.
        use_emoji: Whether console output may include emoji prefixes.

    Returns:
        InstallResult: Paths grouped by the action applied to them.

    Raises:
        GitDirNotFoundError: If ``root`` is not inside a git checkout.
        HookDirectoryError: If the git metadata or hooks directory is inaccessible.
        UserHooksNotFoundError: If user-hooks mode finds no executable hook.
        EmptyUserHookError: If a selected user hook is empty.
        HookWriteError: If reading, writing or removing a hook fails.
    """

    project_root = root.resolve()
    hooks_dir = resolve_hooks_dir(project_root)
    stamp = version or __version__
    current = Version(stamp)

    user_scripts = load_user_hooks(project_root, stamp) if features.user_hooks else {}

    result = InstallResult(dry_run=dry_run)
    for hook in available_hooks():
        if features.user_hooks:
            desired = user_scripts.get(hook)
        else:
            script = render_hook(features, hook, stamp)
            desired = None if script is None else script.to_bytes()
        plan = plan_hook(hook, hooks_dir=hooks_dir, desired=desired, current=current)
        apply_plan(plan, dry_run=dry_run, use_emoji=use_emoji)
        result.record(plan.action, plan.path)

    _summarise(result, hooks_dir, use_emoji=use_emoji)
    return result


__all__ = ["HookPlan", "apply_plan", "decide_action", "install_hooks", "plan_hook"]
