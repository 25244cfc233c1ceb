# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised while aggregating and rendering review reports."""

from __future__ import annotations

from enum import Enum


class ReportPhase(str, Enum):
    """Enumerate the pipeline phases an error can originate from."""

    ACCUMULATION = "accumulation"
    RENDERING = "rendering"


class ReviewReportError(RuntimeError):
    """Base error carrying the failing phase and, when known, rule and file."""

    def __init__(
        self,
        message: str,
        *,
        phase: ReportPhase,
        rule_id: str | None = None,
        path: str | None = None,
    ) -> None:
        """Create the error with diagnostic context.

        Args:
            message: Human readable description of the failure.
            phase: Pipeline phase that was running when the failure happened.
            rule_id: Optional identifier of the rule being processed.
            path: Optional path of the file being processed.
        """

        super().__init__(message)
        self.message = message
        self.phase = phase
        self.rule_id = rule_id
        self.path = path

    def describe(self) -> str:
        """Return a one-line diagnostic naming the phase, rule and file.

        Returns:
            str: Diagnostic text suitable for user-facing output.
        """

        parts = [f"{self.phase.value} failed: {self.message}"]
        if self.rule_id:
            parts.append(f"rule={self.rule_id}")
        if self.path:
            parts.append(f"file={self.path}")
        return " ".join(parts)


class AccumulationError(ReviewReportError):
    """Raised when the aggregator is used outside its single-writer lifecycle."""

    def __init__(self, message: str, *, rule_id: str | None = None, path: str | None = None) -> None:
        super().__init__(message, phase=ReportPhase.ACCUMULATION, rule_id=rule_id, path=path)


class AssetReadError(ReviewReportError):
    """Raised when a packaged asset (template or logo) cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(message, phase=ReportPhase.RENDERING)


class MalformedHighlightError(ReviewReportError):
    """Raised when a finding's highlight offsets fall outside its source line."""

    def __init__(self, message: str, *, rule_id: str | None = None, path: str | None = None) -> None:
        super().__init__(message, phase=ReportPhase.RENDERING, rule_id=rule_id, path=path)


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


__all__ = (
    "AccumulationError",
    "AssetReadError",
    "ConfigError",
    "MalformedHighlightError",
    "ReportPhase",
    "ReviewReportError",
)
