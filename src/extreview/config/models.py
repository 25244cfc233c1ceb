# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Static configuration consumed by the review report renderer."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.severity import DEFAULT_SEVERITY_COLORS, Color, Severity
from ..errors import ConfigError
from .defaults import (
    DEFAULT_DEPARTMENT_DESCRIPTIONS,
    DEFAULT_DEPARTMENT_ORDER,
    DEFAULT_HIGHLIGHT_FADE,
    DEFAULT_LOGO_NAME,
    DEFAULT_TEMPLATE_NAME,
    MISSING_DESCRIPTION,
)


class ReviewConfig(BaseModel):
    """Immutable lookup tables and asset names used while rendering a report."""

    model_config = ConfigDict(frozen=True)

    department_order: tuple[str, ...] = DEFAULT_DEPARTMENT_ORDER
    department_descriptions: Mapping[str, str] = Field(default_factory=lambda: DEFAULT_DEPARTMENT_DESCRIPTIONS)
    severity_colors: Mapping[Severity, Color] = Field(default_factory=lambda: DEFAULT_SEVERITY_COLORS)
    missing_description: str = MISSING_DESCRIPTION
    highlight_fade: float = Field(default=DEFAULT_HIGHLIGHT_FADE, ge=0.0, le=1.0)
    template_name: str = DEFAULT_TEMPLATE_NAME
    logo_name: str = DEFAULT_LOGO_NAME

    @field_validator("department_order")
    @classmethod
    def _reject_duplicate_departments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure every department appears at most once in the priority list.

        Args:
            value: Candidate priority list.

        Returns:
            tuple[str, ...]: The unchanged priority list.

        Raises:
            ValueError: If a department is listed more than once.
        """

        duplicates = sorted({name for name in value if value.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate departments in priority list: {', '.join(duplicates)}")
        return value

    @field_validator("department_descriptions")
    @classmethod
    def _freeze_descriptions(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        """Return a read-only view of the department description table."""

        return MappingProxyType(dict(value))

    @field_validator("severity_colors")
    @classmethod
    def _require_every_severity(cls, value: Mapping[Severity, Color]) -> Mapping[Severity, Color]:
        """Ensure the colour table covers every severity level.

        Args:
            value: Candidate severity colour table.

        Returns:
            Mapping[Severity, Color]: Read-only view of the colour table.

        Raises:
            ValueError: If a severity level has no colour.
        """

        missing = [severity.value for severity in Severity if severity not in value]
        if missing:
            raise ValueError(f"missing colours for severities: {', '.join(missing)}")
        return MappingProxyType(dict(value))

    def description_for(self, department: str) -> str | None:
        """Return the long-form description of ``department`` when one exists."""

        return self.department_descriptions.get(department)

    def color_for(self, severity: Severity) -> Color:
        """Return the display colour associated with ``severity``."""

        return self.severity_colors[severity]

    def with_overrides(self, **updates: Any) -> ReviewConfig:
        """Return a validated copy of the configuration with ``updates`` applied.

        Args:
            **updates: Field values replacing those of the current configuration.

        Returns:
            ReviewConfig: New configuration instance.

        Raises:
            ConfigError: If the resulting configuration is invalid.
        """

        payload = {name: getattr(self, name) for name in type(self).model_fields}
        payload.update(updates)
        try:
            return ReviewConfig.model_validate(payload)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


DEFAULT_CONFIG = ReviewConfig()

__all__ = ["DEFAULT_CONFIG", "ReviewConfig"]
