# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render a frozen report to HTML through the packaged Jinja2 template."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from jinja2 import Environment, PackageLoader, StrictUndefined, Template, TemplateError, select_autoescape
from markupsafe import Markup

from ..config import DEFAULT_CONFIG, ReviewConfig
from ..core.models import OffenseRecord, Report, Summary
from ..core.severity import Severity
from ..errors import AssetReadError
from .ordering import sort_categories
from .presenters.html import ASSET_DIRECTORY, ASSET_PACKAGE, ReportPresenter, SeenDepartments

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FindingView:
    """Display-ready fragments for one finding."""

    path: str
    line: int
    severity: str
    message: Markup
    source: Markup


@dataclass(frozen=True, slots=True)
class RuleSection:
    """Subsection listing every finding of one rule."""

    rule_id: str
    anchor: str
    offense_count: str
    findings: tuple[FindingView, ...]


@dataclass(frozen=True, slots=True)
class DepartmentSection:
    """Section grouping the rules of one department."""

    name: str
    description: Markup
    offense_count: str
    rules: tuple[RuleSection, ...]


@dataclass(frozen=True, slots=True)
class SeverityStyle:
    """Colours used by the stylesheet for one severity."""

    name: str
    color: str
    fade: str


class ReportRenderer:
    """Drive the template pass over a frozen :class:`Report`."""

    def __init__(self, config: ReviewConfig = DEFAULT_CONFIG) -> None:
        """Create the renderer and its autoescaping template environment.

        Args:
            config: Static lookup tables and asset names.
        """

        self._config = config
        self._env = Environment(
            loader=PackageLoader(ASSET_PACKAGE, ASSET_DIRECTORY),
            autoescape=select_autoescape(["html", "j2"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, report: Report) -> str:
        """Return the HTML document for ``report``.

        Args:
            report: Frozen aggregate produced by the aggregator.

        Returns:
            str: Complete HTML document.

        Raises:
            AssetReadError: If the template or logo cannot be read.
            MalformedHighlightError: If a finding carries invalid highlight offsets.
        """

        categories = sort_categories(report.categories, self._config.department_order)
        presenter = ReportPresenter(categories, self._config)
        sections = build_sections(categories, presenter)
        template = self._load_template()
        LOGGER.debug("rendering %d department section(s)", len(sections))
        return template.render(
            summary=_summary_context(report.summary, presenter),
            files=report.files,
            sections=sections,
            severities=_severity_styles(presenter),
            logo=presenter.base64_encoded_logo_image(),
        )

    def render_to(self, report: Report, output: TextIO) -> None:
        """Render ``report`` and write the document to ``output`` in one call."""

        output.write(self.render(report))

    def _load_template(self) -> Template:
        try:
            return self._env.get_template(self._config.template_name)
        except TemplateError as exc:
            raise AssetReadError(f"cannot load report template {self._config.template_name!r}: {exc}") from exc


def build_sections(
    categories: Mapping[str, tuple[OffenseRecord, ...]],
    presenter: ReportPresenter,
) -> tuple[DepartmentSection, ...]:
    """Group sorted categories into department sections.

    The departments already opened are threaded through the loop as an
    explicit accumulator, so every call starts from an empty set.

    Args:
        categories: Findings keyed by rule identifier, in report order.
        presenter: Presenter bound to ``categories``.

    Returns:
        tuple[DepartmentSection, ...]: Sections in report order.
    """

    grouped: list[tuple[str, list[RuleSection]]] = []
    seen: SeenDepartments = frozenset()
    for rule_id, records in categories.items():
        is_new, seen = presenter.new_department(rule_id, seen)
        if is_new:
            grouped.append((rule_id, []))
        grouped[-1][1].append(_rule_section(rule_id, records, presenter))
    return tuple(
        DepartmentSection(
            name=presenter.department(first_rule),
            description=presenter.department_description(first_rule),
            offense_count=presenter.pluralize(presenter.department_offense_count(first_rule), "offense"),
            rules=tuple(rules),
        )
        for first_rule, rules in grouped
    )


def _rule_section(rule_id: str, records: tuple[OffenseRecord, ...], presenter: ReportPresenter) -> RuleSection:
    findings = tuple(
        FindingView(
            path=record.path,
            line=record.finding.first_line,
            severity=record.finding.severity.value,
            message=presenter.decorated_message(record.finding),
            source=presenter.highlighted_source_line(record.finding),
        )
        for record in records
    )
    return RuleSection(
        rule_id=rule_id,
        anchor=presenter.cop_anchor(rule_id),
        offense_count=presenter.pluralize(len(records), "offense"),
        findings=findings,
    )


def _summary_context(summary: Summary, presenter: ReportPresenter) -> dict[str, object]:
    return {
        "offense_count": summary.offense_count,
        "inspected_files": len(summary.inspected_files),
        "target_files": len(summary.target_files),
        "offense_text": presenter.pluralize(summary.offense_count, "offense", no_for_zero=True),
        "file_text": presenter.pluralize(len(summary.inspected_files), "file"),
        "target_text": presenter.pluralize(len(summary.target_files), "file"),
    }


def _severity_styles(presenter: ReportPresenter) -> tuple[SeverityStyle, ...]:
    return tuple(
        SeverityStyle(
            name=severity.value,
            color=str(presenter.severity_color(severity)),
            fade=str(presenter.severity_fade(severity)),
        )
        for severity in Severity
    )


__all__ = [
    "DepartmentSection",
    "FindingView",
    "ReportRenderer",
    "RuleSection",
    "SeverityStyle",
    "build_sections",
]
