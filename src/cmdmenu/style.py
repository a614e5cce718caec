# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Styling helpers for label formats.

Host-side registry handed to the menu generator; the generator itself does
not depend on this module.
"""

from __future__ import annotations

from collections.abc import Callable

import click

COLOR_NAMES = ("default", "black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


def _styler(**style: str | bool) -> Callable[..., str]:
    def apply(*values: object) -> str:
        return click.style(" ".join(str(v) for v in values), **style)

    return apply


def _plain(*values: object) -> str:
    return " ".join(str(v) for v in values)


def style_helpers(color: bool = True) -> dict[str, Callable[..., str]]:
    """Build the helper registry exposed to label formats.

    Args:
        color: When False every helper returns its arguments unstyled

    Returns:
        Mapping of helper name to callable (colors, ``bold``, ``underline``)
    """
    names = [*COLOR_NAMES, "bold", "underline"]
    if not color:
        return {name: _plain for name in names}

    helpers: dict[str, Callable[..., str]] = {
        name: _styler(fg="reset" if name == "default" else name) for name in COLOR_NAMES
    }
    helpers["bold"] = _styler(bold=True)
    helpers["underline"] = _styler(underline=True)
    return helpers
