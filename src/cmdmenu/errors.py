# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Exception hierarchy for menu generation."""

from __future__ import annotations


class MenuGeneratorError(Exception):
    """Base exception for menu generation."""

    stage = "generate"

    def __init__(self, diagnostic: str) -> None:
        self.diagnostic = diagnostic
        super().__init__(self.describe())

    def describe(self) -> str:
        return f"unable to generate menu, error: {self.diagnostic}"


class FilterSyntaxError(MenuGeneratorError):
    """Filter regex failed to compile."""

    stage = "filter"

    def describe(self) -> str:
        return f"unable to parse filter regex, error: {self.diagnostic}"


class ValueFormatSyntaxError(MenuGeneratorError):
    """Value format template failed to compile."""

    stage = "value_format"

    def describe(self) -> str:
        return f"unable to parse value format, error: {self.diagnostic}"


class LabelFormatSyntaxError(MenuGeneratorError):
    """Label format template failed to compile."""

    stage = "label_format"

    def describe(self) -> str:
        return f"unable to parse label format, error: {self.diagnostic}"


class RenderError(MenuGeneratorError):
    """Template execution failed for a line of command output."""

    stage = "render"

    def __init__(self, diagnostic: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(diagnostic)

    def describe(self) -> str:
        if self.line_number is None:
            return f"unable to render menu item, error: {self.diagnostic}"
        return f"unable to render menu item for line {self.line_number} ({self.line!r}), error: {self.diagnostic}"

    def at_line(self, line_number: int, line: str) -> RenderError:
        """Return a copy of this error annotated with the failing line."""
        located = RenderError(self.diagnostic, line_number=line_number, line=line)
        located.__cause__ = self.__cause__
        return located
