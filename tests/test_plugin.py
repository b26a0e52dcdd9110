# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the pytest plugin entry point."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from pyhusky.constants import DONT_INSTALL_ENV
from pyhusky.plugin import install_for_session, pytest_configure


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(DONT_INSTALL_ENV, raising=False)
    monkeypatch.delenv("PYTEST_XDIST_WORKER", raising=False)


def test_configure_installs_hooks(repo: Path, hook_path) -> None:
    pytest_configure(SimpleNamespace(rootpath=repo))  # type: ignore[arg-type]

    assert hook_path("pre-push").is_file()


def test_opt_out_environment_variable(repo: Path, hook_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(DONT_INSTALL_ENV, "1")

    assert install_for_session(repo) is None
    assert not hook_path("pre-push").exists()


def test_xdist_workers_do_not_install(repo: Path, hook_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PYTEST_XDIST_WORKER", "gw0")

    assert install_for_session(repo) is None
    assert not hook_path("pre-push").exists()


def test_outside_git_repository_is_skipped(tmp_path: Path) -> None:
    assert install_for_session(tmp_path) is None


def test_installation_errors_abort_the_session(repo: Path) -> None:
    (repo / "pyproject.toml").write_text(
        '[tool.pyhusky]\ndefault-features = false\nfeatures = ["user-hooks"]\n',
        encoding="utf-8",
    )

    with pytest.raises(pytest.UsageError, match="User hooks directory is not found"):
        install_for_session(repo)


def test_hooks_directory_errors_abort_the_session(repo: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _deny(*args, **kwargs):  # noqa: ANN002, ANN003
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr("pyhusky.hooks.writer.tempfile.mkstemp", _deny)

    with pytest.raises(pytest.UsageError, match="Permission denied"):
        install_for_session(repo)
