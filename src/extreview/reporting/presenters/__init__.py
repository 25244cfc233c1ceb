# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Presenters turning findings into display-ready report fragments."""

from .html import ELLIPSES, ReportPresenter, escape_html, format_plain_text, pluralize

__all__ = (
    "ELLIPSES",
    "ReportPresenter",
    "escape_html",
    "format_plain_text",
    "pluralize",
)
