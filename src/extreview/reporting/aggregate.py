# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Accumulate findings by rule identifier across every processed file."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from types import MappingProxyType

from ..core.models import Finding, OffenseRecord, Report, Summary
from ..errors import AccumulationError

LOGGER = logging.getLogger(__name__)


class OffenseAggregator:
    """Collect findings into per-rule buckets until the run finishes.

    The aggregator is the single writer of the growing mapping. Once
    :meth:`finish` hands out the frozen :class:`Report` any further mutation
    raises :class:`AccumulationError`.
    """

    def __init__(self) -> None:
        self._categories: dict[str, list[OffenseRecord]] = {}
        self._files: list[str] = []
        self._target_files: tuple[str, ...] = ()
        self._offense_count = 0
        self._report: Report | None = None

    @property
    def finished(self) -> bool:
        """Return ``True`` once :meth:`finish` has been called."""

        return self._report is not None

    @property
    def offense_count(self) -> int:
        """Return the number of findings recorded so far."""

        return self._offense_count

    def record_targets(self, target_files: Iterable[str]) -> None:
        """Remember the files the analysis engine intends to inspect.

        Args:
            target_files: Paths announced at the start of the run.

        Raises:
            AccumulationError: If the report has already been finalised.
        """

        self._ensure_open()
        self._target_files = tuple(str(path) for path in target_files)

    def record_file(self, path: str) -> None:
        """Append ``path`` to the processed files.

        Args:
            path: File reported as finished by the analysis engine.

        Raises:
            AccumulationError: If the report has already been finalised.
        """

        self._ensure_open(path=path)
        self._files.append(str(path))

    def record_findings(self, path: str, findings: Sequence[Finding]) -> None:
        """Bucket each finding under its rule identifier in arrival order.

        Args:
            path: File the findings were reported for.
            findings: Findings reported for ``path``.

        Raises:
            AccumulationError: If the report has already been finalised.
        """

        self._ensure_open(path=path)
        for finding in findings:
            bucket = self._categories.setdefault(finding.rule_id, [])
            bucket.append(OffenseRecord(path=str(path), finding=finding))
        self._offense_count += len(findings)
        LOGGER.debug("recorded %d finding(s) for %s", len(findings), path)

    def finish(self, inspected_files: Iterable[str] | None = None) -> Report:
        """Freeze the accumulated data into a read-only :class:`Report`.

        Args:
            inspected_files: Files the analysis engine reports as inspected.
                Defaults to the processed files when omitted.

        Returns:
            Report: Frozen aggregate view handed to the renderer.

        Raises:
            AccumulationError: If the report has already been finalised.
        """

        self._ensure_open()
        inspected = tuple(str(path) for path in inspected_files) if inspected_files is not None else tuple(self._files)
        summary = Summary(
            offense_count=self._offense_count,
            target_files=self._target_files,
            inspected_files=inspected,
        )
        categories = {rule_id: tuple(records) for rule_id, records in self._categories.items()}
        self._report = Report(
            categories=MappingProxyType(categories),
            files=tuple(sorted(set(self._files))),
            summary=summary,
        )
        LOGGER.debug(
            "accumulation finished: %d finding(s) across %d rule(s) in %d file(s)",
            summary.offense_count,
            len(categories),
            len(inspected),
        )
        return self._report

    def _ensure_open(self, *, path: str | None = None) -> None:
        if self._report is not None:
            raise AccumulationError("report is already finalised", path=path)


__all__ = ["OffenseAggregator"]
