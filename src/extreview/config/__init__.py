# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and built-in defaults for report rendering."""

from __future__ import annotations

from ..errors import ConfigError
from .defaults import DEFAULT_DEPARTMENT_DESCRIPTIONS, DEFAULT_DEPARTMENT_ORDER, MISSING_DESCRIPTION
from .models import DEFAULT_CONFIG, ReviewConfig

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_DEPARTMENT_DESCRIPTIONS",
    "DEFAULT_DEPARTMENT_ORDER",
    "MISSING_DESCRIPTION",
    "ConfigError",
    "ReviewConfig",
]
