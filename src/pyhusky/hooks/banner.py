# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version banner stamped on the third line of every script pyhusky installs."""

from __future__ import annotations

import re
from typing import Final

from ..constants import BANNER_TEMPLATE, HOMEPAGE, TOOL_NAME

# Zero-based index of the banner line: shebang, blank line, banner.
BANNER_LINE_INDEX: Final[int] = 2

BANNER_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^# This hook was set by {re.escape(TOOL_NAME)} v(?P<version>[^:\s]+): ",
)


def banner_line(version: str) -> str:
    """Return the banner comment recording ``version`` as the script owner."""

    return BANNER_TEMPLATE.format(tool=TOOL_NAME, version=version, homepage=HOMEPAGE)


__all__ = ["BANNER_LINE_INDEX", "BANNER_PATTERN", "banner_line"]
