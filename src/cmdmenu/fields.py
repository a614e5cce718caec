# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Field extraction from a single line of command output."""

from __future__ import annotations

import re


class FieldMap(dict[str, str]):
    """Captured fields for one line.

    Positional captures are stored as ``group_<N>`` (``group_0`` is the whole
    match); named captures are additionally stored under their name. Looking
    up an identifier that was not captured yields an empty string.
    """

    def __missing__(self, key: str) -> str:
        return ""


def compile_filter(filter_pattern: str) -> re.Pattern[str]:
    """Compile a filter regex.

    Raises:
        re.error: If the pattern is not valid regex syntax
    """
    return re.compile(filter_pattern)


def extract_fields(line: str, pattern: re.Pattern[str]) -> FieldMap:
    """Extract capture groups from the first match of ``pattern`` in ``line``.

    Only the leftmost match is used; later matches in the same line are
    ignored. A line without a match yields an empty map.

    Args:
        line: One line of command output (untrimmed)
        pattern: Compiled filter regex

    Returns:
        FieldMap of positional and named captures
    """
    fields = FieldMap()
    match = pattern.search(line)
    if match is None:
        return fields

    for index in range(pattern.groups + 1):
        fields[f"group_{index}"] = match.group(index) or ""

    for name, index in pattern.groupindex.items():
        fields[name] = fields[f"group_{index}"]

    return fields
