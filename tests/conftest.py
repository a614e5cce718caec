# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest
import structlog


@pytest.fixture
def bracket_helpers() -> dict[str, Callable[..., str]]:
    """Helper registry that marks its input instead of emitting ANSI codes."""

    def blue(value: object) -> str:
        return f"<blue>{value}</blue>"

    def bold(value: object) -> str:
        return f"<b>{value}</b>"

    return {"blue": blue, "bold": bold}


@pytest.fixture
def branch_output() -> str:
    """Output shaped like ``git branch``."""
    return "* main\n  feature/login\n  fix-123\n"


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove CMDMENU_* variables so settings use their defaults."""
    for var in ("CMDMENU_LOG_LEVEL", "CMDMENU_COLOR", "CMDMENU_OUTPUT_FORMAT"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop logging configuration bound to a test's captured streams."""
    yield
    structlog.reset_defaults()
