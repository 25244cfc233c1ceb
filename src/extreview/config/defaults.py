# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in department ordering and descriptions."""

from __future__ import annotations

from collections.abc import Mapping
from inspect import cleandoc
from types import MappingProxyType
from typing import Final

MISSING_DESCRIPTION: Final[str] = "MISSING DESCRIPTION"

DEFAULT_DEPARTMENT_ORDER: Final[tuple[str, ...]] = (
    "SketchupRequirements",
    "SketchupDeprecations",
    "SketchupPerformance",
    "SketchupSuggestions",
)

DEFAULT_DEPARTMENT_DESCRIPTIONS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "SketchupRequirements": cleandoc(
            """
            This is the most important set of checks. They represent a large
            part of the technical requirements an extension must pass in order
            to be hosted on Extension Warehouse.

            They have been designed to prevent extensions from conflicting with
            each other as well as avoiding bad side-effects for the end user.

            Please address these as soon as possible.
            """,
        ),
        "SketchupDeprecations": cleandoc(
            """
            This department checks for usage of deprecated features. It's
            recommended that you migrate your code away from deprecated features
            of the SketchUp API.

            This department is not a requirement for submission to
            Extension Warehouse.
            """,
        ),
        "SketchupPerformance": cleandoc(
            """
            This department looks for known patterns that have noticeable
            performance impact on SketchUp and/or your extension. It's worth
            looking into these warnings and investigate whether performance
            can be improved.

            This department is not a requirement for submission to
            Extension Warehouse.
            """,
        ),
        "SketchupSuggestions": cleandoc(
            """
            This department is a collection of suggestions for best practices
            that aim to improve the general quality of your extension. Some of
            these might be more noisy than the rest of the cops. Disable as
            needed after reviewing the suggestions.

            This department is not a requirement for submission to
            Extension Warehouse.
            """,
        ),
    },
)

DEFAULT_TEMPLATE_NAME: Final[str] = "output.html.j2"
DEFAULT_LOGO_NAME: Final[str] = "logo.png"
DEFAULT_HIGHLIGHT_FADE: Final[float] = 0.8

__all__ = [
    "DEFAULT_DEPARTMENT_DESCRIPTIONS",
    "DEFAULT_DEPARTMENT_ORDER",
    "DEFAULT_HIGHLIGHT_FADE",
    "DEFAULT_LOGO_NAME",
    "DEFAULT_TEMPLATE_NAME",
    "MISSING_DESCRIPTION",
]
