# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for recognising pyhusky-owned hook scripts."""

from __future__ import annotations

from pathlib import Path

import pytest
from packaging.version import Version

from pyhusky.hooks import Absent, FeatureSet, ForeignUnrecognized, HookName, OwnedWithVersion, classify, render_hook
from pyhusky.hooks.classifier import classify_record, load_installed


def test_missing_file_is_absent() -> None:
    assert classify(None) == Absent()


def test_generated_script_is_owned() -> None:
    script = render_hook(FeatureSet.from_features(["prepush-hook", "run-test"]), HookName.PRE_PUSH, "0.9.1")
    assert script is not None

    assert classify(script.to_bytes()) == OwnedWithVersion(Version("0.9.1"))


@pytest.mark.parametrize(
    "content",
    [
        b"#!/bin/sh\necho 'hook put by someone else'\n",
        b"#!/bin/sh\n\n\necho 'hook put by someone else'\n",
        b"",
        b"#!/bin/sh\n\n# set by husky v1.0.0: https://example.invalid\n",
        b"#!/bin/sh\n# This hook was set by pyhusky v1.0.0: https://github.com/pyhusky/pyhusky\n",
    ],
)
def test_scripts_without_third_line_banner_are_foreign(content: bytes) -> None:
    assert classify(content) == ForeignUnrecognized()


def test_unparseable_version_is_foreign() -> None:
    content = b"#!/bin/sh\n\n# This hook was set by pyhusky vnot.a.version: https://github.com/pyhusky/pyhusky\n"

    assert classify(content) == ForeignUnrecognized()


def test_undecodable_banner_line_is_foreign() -> None:
    assert classify(b"#!/bin/sh\n\n\xff\xfe\n") == ForeignUnrecognized()


def test_load_installed_reads_version(tmp_path: Path) -> None:
    path = tmp_path / "pre-push"
    path.write_text(
        "#!/bin/sh\n\n# This hook was set by pyhusky v2.0.0: https://github.com/pyhusky/pyhusky\nuv run pytest\n",
        encoding="utf-8",
    )

    record = load_installed(path, HookName.PRE_PUSH)

    assert record is not None
    assert record.version == Version("2.0.0")
    assert record.content == path.read_bytes()
    assert load_installed(tmp_path / "pre-commit", HookName.PRE_COMMIT) is None


def test_classify_record_agrees_with_content(tmp_path: Path) -> None:
    owned = tmp_path / "pre-push"
    owned.write_text(
        "#!/bin/sh\n\n# This hook was set by pyhusky v2.0.0: https://github.com/pyhusky/pyhusky\n",
        encoding="utf-8",
    )
    foreign = tmp_path / "commit-msg"
    foreign.write_text("#!/bin/sh\necho other\n", encoding="utf-8")

    assert classify_record(load_installed(owned, HookName.PRE_PUSH)) == OwnedWithVersion(Version("2.0.0"))
    assert classify_record(load_installed(foreign, HookName.COMMIT_MSG)) == ForeignUnrecognized()
    assert classify_record(load_installed(tmp_path / "post-merge", HookName.POST_MERGE)) == Absent()
