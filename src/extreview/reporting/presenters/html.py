# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""HTML fragment helpers used while rendering a review report."""

from __future__ import annotations

import base64
import logging
import re
from collections.abc import Iterable, Mapping, Sized
from importlib.resources import files
from typing import Final, TypeAlias

from markupsafe import Markup, escape

from ...config import DEFAULT_CONFIG, ReviewConfig
from ...core.models import Finding, department_of
from ...core.severity import Color, Severity
from ...errors import AssetReadError, MalformedHighlightError

LOGGER = logging.getLogger(__name__)

ASSET_PACKAGE: Final[str] = "extreview"
ASSET_DIRECTORY: Final[str] = "assets"
ANCHOR_PREFIX: Final[str] = "offense_"
ELLIPSES: Final[Markup] = Markup('<span class="extra-code">...</span>')

_CODE_SPAN: Final[re.Pattern[str]] = re.compile(r"`(.+?)`")
_PARAGRAPH_BREAK: Final[re.Pattern[str]] = re.compile(r"\n\s*\n")

SeenDepartments: TypeAlias = frozenset[str]


def escape_html(text: str) -> Markup:
    """Escape markup-significant characters in ``text``.

    Already escaped :class:`~markupsafe.Markup` values are returned unchanged,
    so a fragment is never escaped twice.

    Args:
        text: Raw source or message text.

    Returns:
        Markup: Entity-escaped text safe to embed in the report.
    """

    return escape(text)


def format_plain_text(text: str) -> Markup:
    """Split ``text`` into paragraphs and wrap each one in ``<p>`` tags.

    Paragraphs are separated by two or more line breaks, where ``\\n``, ``\\r``
    and ``\\r\\n`` all count as a line break. Whitespace inside a paragraph is
    collapsed so indented source text reads as flowing prose.

    Args:
        text: Plain multi-paragraph text.

    Returns:
        Markup: Escaped paragraphs ready for embedding.
    """

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs = [" ".join(chunk.split()) for chunk in _PARAGRAPH_BREAK.split(normalized)]
    return Markup("").join(Markup("<p>{}</p>").format(paragraph) for paragraph in paragraphs if paragraph)


def pluralize(count: int, word: str, *, no_for_zero: bool = False) -> str:
    """Return ``count`` followed by ``word``, pluralised when needed.

    Args:
        count: Number of items.
        word: Singular noun describing the items.
        no_for_zero: Render ``"no"`` instead of ``0`` when the count is zero.

    Returns:
        str: Text such as ``"1 offense"`` or ``"3 files"``.
    """

    noun = word if count == 1 else f"{word}s"
    number = "no" if no_for_zero and count == 0 else str(count)
    return f"{number} {noun}"


class ReportPresenter:
    """Turn findings and rule identifiers into display-ready fragments.

    A presenter is bound to the sorted categories of a single render pass. It
    holds no mutable state; the departments already visited are threaded
    through :meth:`new_department` explicitly by the caller.
    """

    def __init__(
        self,
        categories: Mapping[str, Sized],
        config: ReviewConfig = DEFAULT_CONFIG,
    ) -> None:
        """Bind the presenter to the categories rendered in this pass.

        Args:
            categories: Findings keyed by rule identifier, in report order.
            config: Static lookup tables used for descriptions and colours.
        """

        self._categories = categories
        self._config = config

    @property
    def config(self) -> ReviewConfig:
        """Return the configuration the presenter was created with."""

        return self._config

    def department(self, rule_id: str) -> str:
        """Return the department prefix of ``rule_id``."""

        return department_of(rule_id)

    def department_description(self, rule_id: str) -> Markup:
        """Return the formatted description of the department owning ``rule_id``.

        Args:
            rule_id: Rule identifier or bare department name.

        Returns:
            Markup: Paragraph markup, or the missing-description sentinel.
        """

        department = self.department(rule_id)
        text = self._config.description_for(department)
        if text is None:
            LOGGER.warning("no description configured for department %s", department)
            text = self._config.missing_description
        return format_plain_text(text)

    def department_offense_count(self, rule_id: str) -> int:
        """Return the number of findings across every rule of a department.

        Args:
            rule_id: Rule identifier or bare department name.

        Returns:
            int: Total findings reported for the department.
        """

        department = self.department(rule_id)
        return sum(
            len(records) for category, records in self._categories.items() if self.department(category) == department
        )

    def new_department(self, rule_id: str, seen: SeenDepartments) -> tuple[bool, SeenDepartments]:
        """Return whether ``rule_id`` opens a department not yet in ``seen``.

        Args:
            rule_id: Rule identifier visited by the render loop.
            seen: Departments already opened earlier in the pass.

        Returns:
            tuple[bool, SeenDepartments]: Transition flag and the updated set.
        """

        department = self.department(rule_id)
        if department in seen:
            return False, seen
        return True, seen | {department}

    def department_transitions(self, rule_ids: Iterable[str]) -> list[bool]:
        """Return the :meth:`new_department` flags for one fresh pass over ``rule_ids``."""

        seen: SeenDepartments = frozenset()
        flags: list[bool] = []
        for rule_id in rule_ids:
            is_new, seen = self.new_department(rule_id, seen)
            flags.append(is_new)
        return flags

    def decorated_message(self, finding: Finding) -> Markup:
        """Escape the message and render backtick spans as inline code.

        Backticks pair up left to right; a trailing backtick without a partner
        stays literal.

        Args:
            finding: Finding whose message should be decorated.

        Returns:
            Markup: Escaped message with ``<code>`` spans.
        """

        message = finding.message
        parts: list[Markup] = []
        cursor = 0
        for match in _CODE_SPAN.finditer(message):
            parts.append(escape_html(message[cursor : match.start()]))
            parts.append(Markup("<code>{}</code>").format(match.group(1)))
            cursor = match.end()
        parts.append(escape_html(message[cursor:]))
        return Markup("").join(parts)

    def highlighted_source_line(self, finding: Finding) -> Markup:
        """Return the source line with the offending span highlighted.

        Args:
            finding: Finding providing the source line and highlight offsets.

        Returns:
            Markup: Escaped line with a severity-classed highlight span, plus an
            ellipsis marker when the finding spans several lines.

        Raises:
            MalformedHighlightError: If the highlight offsets fall outside the line.
        """

        begin, end = self._highlight_bounds(finding)
        line = finding.source_line
        fragment = (
            escape_html(line[:begin])
            + self.highlight_source_tag(finding)
            + escape_html(line[end:])
        )
        if finding.multiline:
            fragment += Markup(" ") + ELLIPSES
        return fragment

    def highlight_source_tag(self, finding: Finding) -> Markup:
        """Return the severity-classed span wrapping the highlighted source."""

        self._highlight_bounds(finding)
        return Markup('<span class="highlight {}">{}</span>').format(
            finding.severity.value,
            finding.highlighted_source,
        )

    def escape(self, text: str) -> Markup:
        """Escape ``text`` for embedding in the report."""

        return escape_html(text)

    def cop_anchor(self, rule_id: str) -> str:
        """Return the in-document anchor identifier for ``rule_id``.

        Args:
            rule_id: Namespaced rule identifier.

        Returns:
            str: Lower-cased identifier with separators replaced, e.g.
            ``offense_sketchupperformance_typecheck``.
        """

        return ANCHOR_PREFIX + rule_id.lower().replace("/", "_")

    def severity_color(self, severity: Severity) -> Color:
        """Return the colour used to display ``severity``."""

        return self._config.color_for(severity)

    def severity_fade(self, severity: Severity) -> Color:
        """Return the faded background colour used to display ``severity``."""

        return self.severity_color(severity).fade_out(self._config.highlight_fade)

    def base64_encoded_logo_image(self) -> str:
        """Return the packaged logo image encoded as base64 text.

        Returns:
            str: Base64 representation of the logo bytes.

        Raises:
            AssetReadError: If the logo asset cannot be read.
        """

        data = read_asset_bytes(self._config.logo_name)
        return base64.b64encode(data).decode("ascii")

    def pluralize(self, count: int, word: str, *, no_for_zero: bool = False) -> str:
        """Return ``count`` and ``word`` pluralised for summary text."""

        return pluralize(count, word, no_for_zero=no_for_zero)

    def _highlight_bounds(self, finding: Finding) -> tuple[int, int]:
        begin, end = finding.highlight_begin, finding.highlight_end
        if not 0 <= begin <= end <= len(finding.source_line):
            raise MalformedHighlightError(
                f"highlight span {begin}..{end} is invalid for a line of length {len(finding.source_line)}",
                rule_id=finding.rule_id,
                path=finding.file_path,
            )
        return begin, end


def read_asset_bytes(name: str) -> bytes:
    """Return the bytes of the packaged asset called ``name``.

    Args:
        name: File name inside the package asset directory.

    Returns:
        bytes: Raw asset content.

    Raises:
        AssetReadError: If the asset is missing or unreadable.
    """

    resource = files(ASSET_PACKAGE) / ASSET_DIRECTORY / name
    try:
        return resource.read_bytes()
    except OSError as exc:
        raise AssetReadError(f"cannot read packaged asset {name!r}: {exc}") from exc


__all__ = [
    "ANCHOR_PREFIX",
    "ELLIPSES",
    "ReportPresenter",
    "SeenDepartments",
    "escape_html",
    "format_plain_text",
    "pluralize",
    "read_asset_bytes",
]
