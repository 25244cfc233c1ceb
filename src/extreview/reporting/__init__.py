# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting pipeline: aggregation, ordering, presenters and HTML rendering."""

from .aggregate import OffenseAggregator
from .formatter import ExtensionReviewFormatter
from .ordering import category_sort_key, sort_categories
from .presenters.html import ReportPresenter
from .render import ReportRenderer, build_sections

__all__ = [
    "ExtensionReviewFormatter",
    "OffenseAggregator",
    "ReportPresenter",
    "ReportRenderer",
    "build_sections",
    "category_sort_key",
    "sort_categories",
]
