# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from extreview.core.models import Finding
from extreview.core.severity import Severity
from extreview.runtime.console.manager import get_console_manager

FindingFactory = Callable[..., Finding]


def _build_finding(
    rule_id: str = "SketchupPerformance/TypeCheck",
    *,
    file_path: str = "src/ext/main.rb",
    severity: Severity = Severity.WARNING,
    message: str = "Avoid type checks.",
    source_line: str = "if entity.is_a?(Sketchup::Face)",
    highlight_begin: int | None = None,
    highlight_end: int | None = None,
    first_line: int = 1,
    last_line: int | None = None,
    **overrides: Any,
) -> Finding:
    begin = 3 if highlight_begin is None else highlight_begin
    end = len(source_line) if highlight_end is None else highlight_end
    return Finding(
        rule_id=rule_id,
        file_path=file_path,
        severity=severity,
        message=message,
        source_line=source_line,
        highlight_begin=begin,
        highlight_end=end,
        first_line=first_line,
        last_line=first_line if last_line is None else last_line,
        **overrides,
    )


@pytest.fixture
def make_finding() -> FindingFactory:
    """Return a factory building valid findings with overridable fields."""
    return _build_finding


@pytest.fixture(autouse=True)
def _fresh_consoles() -> None:
    """Drop cached Rich consoles so each test observes its own captured streams."""
    get_console_manager().clear()
