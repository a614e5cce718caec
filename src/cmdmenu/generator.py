# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Turn command output into menu entries.

Each non-empty line of output becomes one entry. A filter regex captures
fields from the line, and value/label templates build the entry from those
fields. Generation is all-or-nothing: the first error aborts the call and no
entries are returned.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from cmdmenu.errors import FilterSyntaxError, MenuGeneratorError, RenderError
from cmdmenu.fields import compile_filter, extract_fields
from cmdmenu.logging import get_logger
from cmdmenu.models import MenuEntry
from cmdmenu.templates import HelperRegistry, TrimmingRenderer, compile_label_format, compile_value_format

if TYPE_CHECKING:
    from cmdmenu.models import MenuFromCommand

logger = get_logger(__name__)


def _identity_entry(line: str) -> MenuEntry:
    return MenuEntry(value=line, label=line)


@dataclass(frozen=True)
class CompiledGenerator:
    """Filter and templates compiled for one generation call."""

    pattern: re.Pattern[str] | None
    value_renderer: TrimmingRenderer | None
    label_renderer: TrimmingRenderer | None

    @property
    def is_identity(self) -> bool:
        return self.pattern is None

    def entry_for(self, line: str) -> MenuEntry:
        if self.pattern is None or self.value_renderer is None or self.label_renderer is None:
            return _identity_entry(line)
        fields = extract_fields(line, self.pattern)
        value = self.value_renderer.render(fields)
        label = self.label_renderer.render(fields)
        return MenuEntry(value=value, label=label)


def compile_generator(
    filter_pattern: str,
    value_format: str,
    label_format: str,
    helpers: HelperRegistry | None = None,
) -> CompiledGenerator:
    """Compile the filter and formats.

    With all three empty the result passes lines through unchanged.

    Raises:
        FilterSyntaxError: Invalid filter regex
        ValueFormatSyntaxError: Invalid value format
        LabelFormatSyntaxError: Invalid label format
    """
    if not filter_pattern and not value_format and not label_format:
        return CompiledGenerator(pattern=None, value_renderer=None, label_renderer=None)

    try:
        pattern = compile_filter(filter_pattern)
    except re.error as e:
        raise FilterSyntaxError(str(e)) from e

    value_renderer = compile_value_format(value_format)
    label_renderer = compile_label_format(label_format, helpers, value_renderer)
    return CompiledGenerator(pattern=pattern, value_renderer=value_renderer, label_renderer=label_renderer)


def generate_menu(
    command_output: str,
    filter_pattern: str = "",
    value_format: str = "",
    label_format: str = "",
    helpers: HelperRegistry | None = None,
) -> list[MenuEntry]:
    """Build menu entries from command output.

    Args:
        command_output: Raw newline-delimited output
        filter_pattern: Regex applied to each line (first match only)
        value_format: Template producing each entry's value
        label_format: Template producing each entry's label (defaults to value)
        helpers: Functions callable from the label format only

    Returns:
        One entry per non-empty line, in input order

    Raises:
        MenuGeneratorError: On any compile or render failure; no entries are returned
    """
    try:
        compiled = compile_generator(filter_pattern, value_format, label_format, helpers)
    except MenuGeneratorError as e:
        logger.warning("menu_compile_failed", stage=e.stage, error=e.diagnostic)
        raise

    entries: list[MenuEntry] = []
    for line_number, line in enumerate(command_output.split("\n"), 1):
        if line == "":
            continue
        try:
            entries.append(compiled.entry_for(line))
        except RenderError as e:
            logger.warning("menu_generation_failed", line_number=line_number, error=e.diagnostic)
            raise e.at_line(line_number, line) from e.__cause__

    logger.debug("menu_generated", entries=len(entries), identity=compiled.is_identity)
    return entries


class MenuGenerator:
    """Generates menus using a fixed helper registry supplied by the host."""

    def __init__(self, helpers: HelperRegistry | None = None) -> None:
        self._helpers = dict(helpers or {})

    @property
    def helpers(self) -> HelperRegistry:
        return self._helpers

    def generate(
        self,
        command_output: str,
        filter_pattern: str = "",
        value_format: str = "",
        label_format: str = "",
    ) -> list[MenuEntry]:
        return generate_menu(command_output, filter_pattern, value_format, label_format, self._helpers)

    def generate_for(self, prompt: MenuFromCommand, command_output: str) -> list[MenuEntry]:
        """Generate entries for a configured prompt from its command's output."""
        return self.generate(command_output, prompt.filter, prompt.value_format, prompt.label_format)
