# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Hook rendering, classification and installation services."""

from __future__ import annotations

from .classifier import classify
from .features import DEFAULT_FEATURES, FeatureSet, HookCommand
from .models import (
    Absent,
    ForeignUnrecognized,
    GeneratedScript,
    HookAction,
    InstallResult,
    OwnedWithVersion,
    ScriptClassification,
)
from .registry import HookName, available_hooks
from .renderer import render_hook
from .runner import decide_action, install_hooks
from .user_hooks import load_user_hooks

__all__ = [
    "Absent",
    "DEFAULT_FEATURES",
    "FeatureSet",
    "ForeignUnrecognized",
    "GeneratedScript",
    "HookAction",
    "HookCommand",
    "HookName",
    "InstallResult",
    "OwnedWithVersion",
    "ScriptClassification",
    "available_hooks",
    "classify",
    "decide_action",
    "install_hooks",
    "load_user_hooks",
    "render_hook",
]
