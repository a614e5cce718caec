# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Application settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["json", "table"]


class Settings(BaseSettings):
    log_level: str = "WARNING"
    color: bool = True
    output_format: OutputFormat = "json"

    model_config = SettingsConfigDict(
        env_prefix="CMDMENU_",
        extra="ignore",
    )
