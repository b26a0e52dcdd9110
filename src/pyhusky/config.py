# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load pyhusky feature configuration from ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .constants import PYPROJECT_FILENAME, PYPROJECT_SECTION_KEY, PYPROJECT_TOOL_KEY
from .errors import ConfigError
from .hooks.features import DEFAULT_FEATURES, KNOWN_FEATURES, FeatureSet


class HuskyConfig(BaseModel):
    """The ``[tool.pyhusky]`` table.

    ``default-features`` mirrors package-manager feature semantics: when true
    the default features are enabled in addition to ``features``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, strict=True)

    default_features: bool = Field(default=True, alias="default-features")
    features: list[str] = Field(default_factory=list)

    @field_validator("features")
    @classmethod
    def _check_known(cls, value: list[str]) -> list[str]:
        unknown = sorted(set(value) - KNOWN_FEATURES)
        if unknown:
            known = ", ".join(sorted(KNOWN_FEATURES))
            raise ValueError(f"unknown feature(s) {', '.join(unknown)}; expected one of {known}")
        return value

    def feature_names(self) -> tuple[str, ...]:
        """Return enabled feature names, defaults first, without duplicates."""

        names: list[str] = list(DEFAULT_FEATURES) if self.default_features else []
        for feature in self.features:
            if feature not in names:
                names.append(feature)
        return tuple(names)

    def feature_set(self) -> FeatureSet:
        """Return the immutable :class:`FeatureSet` described by this table."""

        return FeatureSet.from_features(self.feature_names())


def _read_pyproject(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc


def load_config(root: Path) -> HuskyConfig:
    """Return the pyhusky configuration for the project at ``root``.

    Args:
        root: Project root that may contain ``pyproject.toml``.

    Returns:
        HuskyConfig: Parsed configuration, or defaults when the file or table is missing.

    Raises:
        ConfigError: If the file cannot be parsed or the table is invalid.
    """

    path = root / PYPROJECT_FILENAME
    if not path.is_file():
        return HuskyConfig()
    document = _read_pyproject(path)
    tool_section = document.get(PYPROJECT_TOOL_KEY, {})
    section = tool_section.get(PYPROJECT_SECTION_KEY, {}) if isinstance(tool_section, Mapping) else {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    try:
        return HuskyConfig.model_validate(dict(section))
    except ValidationError as exc:
        raise ConfigError(f"Invalid [{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path}: {exc}") from exc


def resolve_feature_set(root: Path) -> FeatureSet:
    """Load configuration for ``root`` and resolve its :class:`FeatureSet`."""

    return load_config(root).feature_set()


__all__ = ["HuskyConfig", "load_config", "resolve_feature_set"]
