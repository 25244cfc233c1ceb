# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the extreview package."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

from extreview.core.severity import Severity

DEPARTMENT_SEPARATOR: Final[str] = "/"


class Finding(BaseModel):
    """Describe one rule violation reported by the analysis engine."""

    model_config = ConfigDict(frozen=True)

    rule_id: str = Field(min_length=1)
    file_path: str
    severity: Severity
    message: str
    source_line: str
    highlight_begin: int = Field(ge=0)
    highlight_end: int = Field(ge=0)
    first_line: int = Field(ge=1)
    last_line: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_location(self) -> Finding:
        """Reject findings whose highlight span or line range is inconsistent.

        Returns:
            Finding: The validated finding.

        Raises:
            ValueError: If the highlight offsets or line numbers are out of order.
        """

        if not self.highlight_begin <= self.highlight_end <= len(self.source_line):
            raise ValueError(
                f"highlight span {self.highlight_begin}..{self.highlight_end} "
                f"exceeds source line of length {len(self.source_line)}",
            )
        if self.first_line > self.last_line:
            raise ValueError(f"first_line {self.first_line} is after last_line {self.last_line}")
        return self

    @property
    def department(self) -> str:
        """Return the department prefix of :attr:`rule_id`."""

        return department_of(self.rule_id)

    @property
    def rule_name(self) -> str:
        """Return the rule name following the department prefix."""

        return rule_name_of(self.rule_id)

    @property
    def highlighted_source(self) -> str:
        """Return the exact substring of the source line implicated by the finding."""

        return self.source_line[self.highlight_begin : self.highlight_end]

    @property
    def multiline(self) -> bool:
        """Return ``True`` when the finding spans more than one physical line."""

        return self.first_line != self.last_line


@dataclass(frozen=True, slots=True)
class OffenseRecord:
    """Pair a finding with the path it was reported for."""

    path: str
    finding: Finding


@dataclass(frozen=True, slots=True)
class Summary:
    """Run-level counters displayed in the report header."""

    offense_count: int = 0
    target_files: tuple[str, ...] = ()
    inspected_files: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Report:
    """Frozen aggregate view consumed by the renderer.

    Attributes:
        categories: Findings keyed by rule identifier, in arrival order.
        files: Sorted paths of every processed file.
        summary: Counters collected while the run progressed.
    """

    categories: Mapping[str, tuple[OffenseRecord, ...]]
    files: tuple[str, ...]
    summary: Summary = field(default_factory=Summary)

    @property
    def offense_count(self) -> int:
        """Return the total number of findings recorded for the run."""

        return self.summary.offense_count


def department_of(rule_id: str) -> str:
    """Return the department prefix of ``rule_id``.

    Args:
        rule_id: Namespaced rule identifier such as ``Department/RuleName``.

    Returns:
        str: Text before the first separator, or ``rule_id`` when it has none.
    """

    return rule_id.split(DEPARTMENT_SEPARATOR, 1)[0]


def rule_name_of(rule_id: str) -> str:
    """Return the rule name following the department prefix of ``rule_id``."""

    _, _, name = rule_id.partition(DEPARTMENT_SEPARATOR)
    return name


__all__ = [
    "DEPARTMENT_SEPARATOR",
    "Finding",
    "OffenseRecord",
    "Report",
    "Summary",
    "department_of",
    "rule_name_of",
]
