# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tests for field extraction."""

from __future__ import annotations

import re

import pytest

from cmdmenu.fields import FieldMap, compile_filter, extract_fields


def test_positional_and_named_groups() -> None:
    pattern = re.compile(r"(?P<name>\w+)=(\d+)")
    fields = extract_fields("width=80", pattern)

    assert fields == {
        "group_0": "width=80",
        "group_1": "width",
        "group_2": "80",
        "name": "width",
    }


def test_named_group_aliases_positional_group() -> None:
    pattern = re.compile(r"(?P<hash>[0-9a-f]+) (?P<subject>.*)")
    fields = extract_fields("abc123 Fix the thing", pattern)

    assert fields["hash"] == fields["group_1"] == "abc123"
    assert fields["subject"] == fields["group_2"] == "Fix the thing"


def test_only_first_match_is_used() -> None:
    pattern = re.compile(r"(\d+)")
    fields = extract_fields("a1 b2 c3", pattern)

    assert fields["group_1"] == "1"
    assert fields["group_0"] == "1"


def test_no_match_yields_empty_map() -> None:
    fields = extract_fields("no digits here", re.compile(r"(\d+)"))

    assert fields == {}
    assert fields["group_1"] == ""
    assert fields["anything"] == ""


def test_non_participating_group_is_empty_string() -> None:
    pattern = re.compile(r"(a)|(b)")
    fields = extract_fields("b", pattern)

    assert fields["group_0"] == "b"
    assert fields["group_1"] == ""
    assert fields["group_2"] == "b"


def test_whitespace_line_is_not_trimmed() -> None:
    fields = extract_fields("   ", re.compile(r"^(\s*)$"))

    assert fields["group_1"] == "   "


def test_empty_filter_matches_empty_prefix() -> None:
    fields = extract_fields("foo", compile_filter(""))

    assert fields == {"group_0": ""}


def test_field_map_missing_key() -> None:
    fields = FieldMap(group_0="x")

    assert fields["group_0"] == "x"
    assert fields["nope"] == ""
    assert "nope" not in fields


def test_compile_filter_rejects_bad_syntax() -> None:
    with pytest.raises(re.error):
        compile_filter("(unclosed")
