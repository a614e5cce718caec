# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Menu entry and per-command prompt models."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from cmdmenu.logging import get_logger

logger = get_logger(__name__)


class MenuEntry(BaseModel):
    """One selectable menu item derived from a line of command output."""

    value: str
    label: str

    model_config = ConfigDict(frozen=True)


class MenuFromCommand(BaseModel):
    """Configuration for building a menu from a command's output.

    ``filter`` is a regex applied to each output line; ``value_format`` and
    ``label_format`` are templates over its captures. Leaving all three empty
    shows the output lines as-is.
    """

    command: str = ""
    filter: str = ""
    value_format: str = Field(default="", alias="valueFormat")
    label_format: str = Field(default="", alias="labelFormat")
    title: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class PromptSet(BaseModel):
    """Named menu-from-command prompts, as loaded from a YAML file."""

    prompts: dict[str, MenuFromCommand] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")

    def get(self, name: str) -> MenuFromCommand:
        try:
            return self.prompts[name]
        except KeyError:
            available = ", ".join(sorted(self.prompts)) or "none"
            raise KeyError(f"Unknown prompt {name!r} (available: {available})") from None

    @classmethod
    def from_yaml(cls, path: Path | str) -> PromptSet:
        path = Path(path)
        logger.debug("prompts_loading", path=str(path))
        data = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(data)
