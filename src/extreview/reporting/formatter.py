# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Formatter receiving analysis events and writing the HTML review report."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import ParamSpec, TextIO, TypeVar

from ..config import DEFAULT_CONFIG, ReviewConfig
from ..core.logging import fail
from ..core.models import Finding, Report
from ..errors import ReviewReportError
from .aggregate import OffenseAggregator
from .render import ReportRenderer

LOGGER = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


class ExtensionReviewFormatter:
    """Collect findings file by file and render one report when the run ends.

    The analysis engine calls :meth:`started` once, :meth:`file_finished`
    after each file and :meth:`finished` exactly once. Rendering only starts
    after :meth:`finished`, so accumulation and rendering never overlap.
    """

    def __init__(self, output: TextIO, config: ReviewConfig = DEFAULT_CONFIG) -> None:
        """Create the formatter.

        Args:
            output: Sink receiving the rendered document.
            config: Static lookup tables and asset names.
        """

        self.output = output
        self.config = config
        self._aggregator = OffenseAggregator()
        self._report: Report | None = None

    @property
    def offense_count(self) -> int:
        """Return the number of findings recorded so far."""

        return self._aggregator.offense_count

    @property
    def report(self) -> Report | None:
        """Return the frozen report once :meth:`finished` has run."""

        return self._report

    def started(self, target_files: Iterable[str]) -> None:
        """Record the files the analysis engine is about to inspect.

        Args:
            target_files: Paths scheduled for inspection.
        """

        self._guard(self._aggregator.record_targets, target_files)

    def file_finished(self, path: str, findings: Sequence[Finding]) -> None:
        """Record the findings reported for ``path``.

        Args:
            path: File the analysis engine finished inspecting.
            findings: Findings reported for ``path``; may be empty.
        """

        self._guard(self._aggregator.record_file, path)
        self._guard(self._aggregator.record_findings, path, findings)

    def finished(self, inspected_files: Iterable[str]) -> None:
        """Freeze the accumulated findings and write the report to :attr:`output`.

        Args:
            inspected_files: Paths the analysis engine actually inspected.

        Raises:
            ReviewReportError: If accumulation or rendering fails. A diagnostic
                naming the failing phase is printed before re-raising.
        """

        self._report = self._guard(self._aggregator.finish, inspected_files)
        renderer = ReportRenderer(self.config)
        self._guard(renderer.render_to, self._report, self.output)
        LOGGER.info(
            "review report written: %d offense(s) in %d file(s)",
            self._report.offense_count,
            len(self._report.summary.inspected_files),
        )

    @staticmethod
    def _guard(func: Callable[P, R], *args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except ReviewReportError as exc:
            fail(exc.describe())
            raise


__all__ = ["ExtensionReviewFormatter"]
