# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for discovering and stamping user hook scripts."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from pyhusky.errors import EmptyUserHookError, UserHooksNotFoundError
from pyhusky.hooks import HookName
from pyhusky.hooks.classifier import parse_banner_version
from pyhusky.hooks.user_hooks import discover_user_hooks, load_user_hooks, stamp_user_hook, user_hooks_directory

BANNER = b"# This hook was set by pyhusky v1.2.3: https://github.com/pyhusky/pyhusky\n"

posix_only = pytest.mark.skipif(os.name == "nt", reason="requires POSIX permission bits")


def test_missing_directory_is_rejected(repo: Path) -> None:
    with pytest.raises(UserHooksNotFoundError, match="User hooks directory is not found"):
        discover_user_hooks(repo)


@pytest.mark.parametrize("relative", [Path(".pyhusky"), Path(".pyhusky") / "hooks"])
def test_empty_directory_is_rejected(repo: Path, relative: Path) -> None:
    (repo / relative).mkdir(parents=True)

    with pytest.raises(UserHooksNotFoundError, match="no executable file is found in the directory"):
        discover_user_hooks(repo)


@posix_only
def test_directory_with_only_non_executable_files_is_rejected(repo: Path, user_hook) -> None:
    user_hook("non-executable-file1", "this\nis\nnormal\ntest\nfile\n", executable=False)
    user_hook("pre-commit", "#!/bin/sh\necho hi\n", executable=False)

    with pytest.raises(UserHooksNotFoundError):
        discover_user_hooks(repo)


@posix_only
def test_only_executable_hook_names_are_selected(repo: Path, user_hook) -> None:
    pre_commit = user_hook("pre-commit", "#!/bin/sh\necho commit\n")
    user_hook("post-merge", "#!/bin/sh\necho merge\n", executable=False)
    user_hook("build.sh", "#!/bin/sh\necho build\n")

    source = discover_user_hooks(repo)

    assert dict(source.candidates) == {HookName.PRE_COMMIT: pre_commit}


@posix_only
@pytest.mark.parametrize("name", ["pre-receive", "update", "post-receive", "proc-receive"])
def test_server_side_hook_names_are_not_candidates(repo: Path, user_hook, name: str) -> None:
    user_hook(name, "#!/bin/sh\necho server\n")

    with pytest.raises(UserHooksNotFoundError):
        discover_user_hooks(repo)


def test_nested_hooks_directory_takes_precedence(repo: Path, user_hook) -> None:
    user_hook("pre-push", "#!/bin/sh\necho flat\n", nested=False)
    assert user_hooks_directory(repo) == repo / ".pyhusky"

    user_hook("pre-commit", "#!/bin/sh\necho nested\n")

    assert user_hooks_directory(repo) == repo / ".pyhusky" / "hooks"
    assert set(discover_user_hooks(repo).candidates) == {HookName.PRE_COMMIT}


def test_empty_script_is_rejected(repo: Path, user_hook) -> None:
    user_hook("pre-commit", "")

    with pytest.raises(EmptyUserHookError, match="User hook script is empty"):
        load_user_hooks(repo, "1.2.3")


def test_banner_becomes_third_line() -> None:
    content = b"#! /bin/sh\n\n# This is a user script for pre-commit hook with shebang\necho ok\n"

    stamped = stamp_user_hook(content, "1.2.3")

    assert stamped.splitlines(keepends=True) == [
        b"#! /bin/sh\n",
        b"\n",
        BANNER,
        b"# This is a user script for pre-commit hook with shebang\n",
        b"echo ok\n",
    ]
    assert str(parse_banner_version(stamped)) == "1.2.3"


def test_script_without_shebang_keeps_its_lines() -> None:
    content = b"# Script without shebang\necho merged\n"

    stamped = stamp_user_hook(content, "1.2.3")

    assert stamped == b"# Script without shebang\necho merged\n" + BANNER


def test_two_line_script_without_trailing_newline() -> None:
    assert stamp_user_hook(b"#!/bin/sh\necho hi", "1.2.3") == b"#!/bin/sh\necho hi\n" + BANNER


def test_single_line_script_gets_banner_appended() -> None:
    stamped = stamp_user_hook(b"#!/bin/sh", "1.2.3")

    assert stamped == b"#!/bin/sh\n" + BANNER
    assert parse_banner_version(stamped) is None


@posix_only
def test_load_user_hooks_stamps_each_candidate(repo: Path, user_hook) -> None:
    user_hook("pre-commit", "#!/bin/sh\n\necho commit\n")
    user_hook("post-merge", "#!/bin/sh\n\necho merge\n")

    scripts = load_user_hooks(repo, "1.2.3")

    assert set(scripts) == {HookName.PRE_COMMIT, HookName.POST_MERGE}
    assert scripts[HookName.POST_MERGE] == b"#!/bin/sh\n\n" + BANNER + b"echo merge\n"
