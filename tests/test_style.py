# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

import click

from cmdmenu.generator import generate_menu
from cmdmenu.style import COLOR_NAMES, style_helpers


def test_registry_names() -> None:
    helpers = style_helpers()

    assert set(helpers) == {*COLOR_NAMES, "bold", "underline"}


def test_colored_output_matches_click_style() -> None:
    helpers = style_helpers()

    assert helpers["blue"]("main") == click.style("main", fg="blue")
    assert helpers["bold"]("main") == click.style("main", bold=True)


def test_plain_output() -> None:
    helpers = style_helpers(color=False)

    assert helpers["red"]("a", "b") == "a b"
    assert helpers["underline"](42) == "42"


def test_helpers_in_label_format() -> None:
    entries = generate_menu("main", "(?P<b>.+)", "{{ b }}", "{{ b | yellow }}", style_helpers())

    assert entries[0].value == "main"
    assert entries[0].label == click.style("main", fg="yellow")
