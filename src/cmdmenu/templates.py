# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Value/label template compilation and trimmed rendering.

Formats are Jinja2 templates evaluated against a FieldMap. Fields that were
not captured render as empty strings. Label formats can additionally call
host-supplied helpers, either as functions (``{{ blue(name) }}``) or as
filters (``{{ name | blue }}``); value formats never see them.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TypeAlias

from jinja2 import Environment, Template, TemplateSyntaxError

from cmdmenu.errors import LabelFormatSyntaxError, RenderError, ValueFormatSyntaxError
from cmdmenu.fields import FieldMap

HelperRegistry: TypeAlias = Mapping[str, Callable[..., str]]


def _build_env(helpers: HelperRegistry | None = None) -> Environment:
    env = Environment(autoescape=False)
    for name, func in (helpers or {}).items():
        env.globals[name] = func
        env.filters[name] = func
    return env


class TrimmingRenderer:
    """Wrapper around a compiled template which trims the output."""

    def __init__(self, template: Template) -> None:
        self._template = template
        self._buffer: list[str] = []

    def render(self, fields: FieldMap) -> str:
        """Render against ``fields`` and strip surrounding whitespace.

        Raises:
            RenderError: If the template fails at runtime
        """
        self._buffer.clear()
        try:
            self._buffer.extend(self._template.generate(fields))
        except Exception as e:
            raise RenderError(str(e)) from e
        return "".join(self._buffer).strip()


def compile_value_format(value_format: str) -> TrimmingRenderer:
    """Compile the value format. No helpers are available to it."""
    try:
        template = _build_env().from_string(value_format)
    except TemplateSyntaxError as e:
        raise ValueFormatSyntaxError(str(e)) from e
    return TrimmingRenderer(template)


def compile_label_format(
    label_format: str,
    helpers: HelperRegistry | None,
    value_renderer: TrimmingRenderer,
) -> TrimmingRenderer:
    """Compile the label format with the helper registry.

    An empty label format reuses ``value_renderer`` as-is.
    """
    if not label_format:
        return value_renderer
    try:
        template = _build_env(helpers).from_string(label_format)
    except TemplateSyntaxError as e:
        raise LabelFormatSyntaxError(str(e)) from e
    return TrimmingRenderer(template)
