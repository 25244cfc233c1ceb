# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and the colours used to display them."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

_ALPHA_PRECISION: Final[int] = 4


class Severity(str, Enum):
    """Severity levels reported by the analysis engine, lowest first."""

    REFACTOR = "refactor"
    CONVENTION = "convention"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class Color(BaseModel):
    """RGBA colour whose alpha channel can be adjusted independently."""

    model_config = ConfigDict(frozen=True)

    red: int = Field(ge=0, le=255)
    green: int = Field(ge=0, le=255)
    blue: int = Field(ge=0, le=255)
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)

    def __str__(self) -> str:
        """Return the colour as a CSS ``rgba()`` expression.

        Returns:
            str: CSS colour value such as ``rgba(237, 156, 40, 1.0)``.
        """

        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha})"

    def fade_out(self, amount: float) -> Color:
        """Return a copy of the colour with its alpha reduced by ``amount``.

        Args:
            amount: Alpha decrement applied to the copy.

        Returns:
            Color: Lighter variant of the same hue. The alpha is clamped to ``[0, 1]``.
        """

        alpha = round(self.alpha - amount, _ALPHA_PRECISION)
        return self.model_copy(update={"alpha": min(max(alpha, 0.0), 1.0)})


DEFAULT_SEVERITY_COLORS: Final[Mapping[Severity, Color]] = MappingProxyType(
    {
        Severity.REFACTOR: Color(red=0xED, green=0x9C, blue=0x28),
        Severity.CONVENTION: Color(red=0xED, green=0x9C, blue=0x28),
        Severity.WARNING: Color(red=0x96, green=0x28, blue=0xEF),
        Severity.ERROR: Color(red=0xD2, green=0x32, blue=0x2D),
        Severity.FATAL: Color(red=0xD2, green=0x32, blue=0x2D),
    },
)


__all__ = ["Color", "DEFAULT_SEVERITY_COLORS", "Severity"]
