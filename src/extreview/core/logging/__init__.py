# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers for user-facing diagnostics."""

from __future__ import annotations

from .public import emoji, fail

__all__ = [
    "emoji",
    "fail",
]
