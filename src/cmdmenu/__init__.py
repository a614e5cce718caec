# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Build selectable menus from the output of external commands."""

from __future__ import annotations

from cmdmenu.errors import (
    FilterSyntaxError,
    LabelFormatSyntaxError,
    MenuGeneratorError,
    RenderError,
    ValueFormatSyntaxError,
)
from cmdmenu.fields import FieldMap, extract_fields
from cmdmenu.generator import CompiledGenerator, MenuGenerator, compile_generator, generate_menu
from cmdmenu.models import MenuEntry, MenuFromCommand, PromptSet
from cmdmenu.templates import HelperRegistry, TrimmingRenderer

__all__ = [
    "CompiledGenerator",
    "FieldMap",
    "FilterSyntaxError",
    "HelperRegistry",
    "LabelFormatSyntaxError",
    "MenuEntry",
    "MenuFromCommand",
    "MenuGenerator",
    "MenuGeneratorError",
    "PromptSet",
    "RenderError",
    "TrimmingRenderer",
    "ValueFormatSyntaxError",
    "compile_generator",
    "extract_fields",
    "generate_menu",
]
