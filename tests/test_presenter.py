# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the HTML report presenter helpers."""

from __future__ import annotations

import base64
import html
import logging
from collections.abc import Callable

import pytest
from markupsafe import Markup

from extreview.config import DEFAULT_CONFIG, MISSING_DESCRIPTION
from extreview.core.models import Finding
from extreview.core.severity import Severity
from extreview.errors import AssetReadError, MalformedHighlightError, ReportPhase
from extreview.reporting.presenters.html import ELLIPSES, ReportPresenter, format_plain_text, pluralize

FindingFactory = Callable[..., Finding]


def _presenter(categories: dict[str, list[object]] | None = None) -> ReportPresenter:
    return ReportPresenter(categories or {}, DEFAULT_CONFIG)


def test_department_is_prefix_before_first_separator() -> None:
    presenter = _presenter()
    assert presenter.department("SketchupPerformance/TypeCheck") == "SketchupPerformance"


def test_department_description_wraps_each_paragraph() -> None:
    description = str(_presenter().department_description("SketchupRequirements/Foo"))

    assert description.startswith("<p>This is the most important set of checks.")
    assert description.count("<p>") == 3
    assert "Please address these as soon as possible.</p>" in description


def test_missing_description_renders_sentinel(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING)
    description = _presenter().department_description("Unknown/Rule")

    assert description == f"<p>{MISSING_DESCRIPTION}</p>"
    assert "no description configured for department Unknown" in caplog.text


@pytest.mark.parametrize("newline", ["\n", "\r", "\r\n"])
def test_plain_text_splits_on_blank_lines(newline: str) -> None:
    text = newline.join(["First line", "continues.", "", "", "Second paragraph."])
    assert format_plain_text(text) == "<p>First line continues.</p><p>Second paragraph.</p>"


def test_plain_text_keeps_single_line_breaks_within_paragraph() -> None:
    assert format_plain_text("one\r\ntwo") == "<p>one two</p>"


def test_plain_text_escapes_paragraph_content() -> None:
    assert format_plain_text("a < b") == "<p>a &lt; b</p>"


def test_department_offense_count_sums_every_rule_of_department() -> None:
    presenter = _presenter(
        {
            "SketchupPerformance/TypeCheck": [1, 2],
            "SketchupPerformance/OpenSSL": [1],
            "SketchupRequirements/Foo": [1, 2, 3],
        },
    )

    assert presenter.department_offense_count("SketchupPerformance/TypeCheck") == 3
    assert presenter.department_offense_count("SketchupRequirements") == 3
    assert presenter.department_offense_count("Missing/Rule") == 0


def test_new_department_is_true_once_per_department() -> None:
    presenter = _presenter()
    rule_ids = ["A/a", "A/z", "B/a", "B/b", "C/c"]

    first = presenter.department_transitions(rule_ids)
    second = presenter.department_transitions(rule_ids)

    assert first == [True, False, True, False, True]
    assert first == second


def test_new_department_threads_seen_set_explicitly() -> None:
    presenter = _presenter()
    is_new, seen = presenter.new_department("A/a", frozenset())
    assert is_new
    assert seen == frozenset({"A"})

    again, unchanged = presenter.new_department("A/b", seen)
    assert not again
    assert unchanged is seen


def test_decorated_message_wraps_backtick_spans(make_finding: FindingFactory) -> None:
    finding = make_finding(message="use `foo` not `bar`")
    assert _presenter().decorated_message(finding) == "use <code>foo</code> not <code>bar</code>"


def test_decorated_message_leaves_unmatched_backtick(make_finding: FindingFactory) -> None:
    finding = make_finding(message="use `foo` or `bar")
    assert _presenter().decorated_message(finding) == "use <code>foo</code> or `bar"


def test_decorated_message_escapes_text_and_code(make_finding: FindingFactory) -> None:
    finding = make_finding(message="call `a < b` & <script>")
    decorated = _presenter().decorated_message(finding)

    assert decorated == "call <code>a &lt; b</code> &amp; &lt;script&gt;"
    assert isinstance(decorated, Markup)


def test_highlighted_source_line_wraps_exact_span(make_finding: FindingFactory) -> None:
    finding = make_finding(
        source_line="x = eval(code) # bad",
        highlight_begin=4,
        highlight_end=14,
        severity=Severity.ERROR,
    )
    rendered = _presenter().highlighted_source_line(finding)

    assert rendered == 'x = <span class="highlight error">eval(code)</span> # bad'


def test_highlighted_source_line_escapes_each_fragment_once(make_finding: FindingFactory) -> None:
    source = 'if a < b && c > "d" then'
    finding = make_finding(source_line=source, highlight_begin=5, highlight_end=20)
    rendered = str(_presenter().highlighted_source_line(finding))
    opening = '<span class="highlight warning">'
    stripped = rendered.replace(opening, "").replace("</span>", "")

    assert "<" not in stripped
    assert "&amp;amp;" not in rendered
    span = rendered.split('<span class="highlight warning">', 1)[1].split("</span>", 1)[0]
    assert html.unescape(span) == source[5:20]
    assert html.unescape(stripped) == source


def test_ellipsis_only_for_multiline_findings(make_finding: FindingFactory) -> None:
    presenter = _presenter()
    single = str(presenter.highlighted_source_line(make_finding(first_line=4)))
    multi = str(presenter.highlighted_source_line(make_finding(first_line=4, last_line=6)))

    assert str(ELLIPSES) not in single
    assert multi.endswith(" " + str(ELLIPSES))


def test_empty_highlight_span_is_allowed(make_finding: FindingFactory) -> None:
    finding = make_finding(source_line="end", highlight_begin=3, highlight_end=3)
    assert _presenter().highlighted_source_line(finding) == 'end<span class="highlight warning"></span>'


def test_malformed_offsets_fail_fast(make_finding: FindingFactory) -> None:
    valid = make_finding(rule_id="A/b", file_path="lib/x.rb")
    broken = Finding.model_construct(**{**valid.model_dump(), "highlight_begin": 10, "highlight_end": 2})

    with pytest.raises(MalformedHighlightError) as excinfo:
        _presenter().highlighted_source_line(broken)
    assert excinfo.value.phase is ReportPhase.RENDERING
    assert excinfo.value.rule_id == "A/b"
    assert excinfo.value.path == "lib/x.rb"


def test_escape_is_idempotent_for_markup() -> None:
    presenter = _presenter()
    once = presenter.escape('<a href="x">&</a>')

    assert once == "&lt;a href=&#34;x&#34;&gt;&amp;&lt;/a&gt;"
    assert presenter.escape(once) == once


def test_cop_anchor() -> None:
    presenter = _presenter()
    assert presenter.cop_anchor("SketchupPerformance/TypeCheck") == "offense_sketchupperformance_typecheck"
    assert presenter.cop_anchor("A/B") != presenter.cop_anchor("A/C")


def test_logo_is_base64_encoded_png() -> None:
    encoded = _presenter().base64_encoded_logo_image()
    assert base64.b64decode(encoded).startswith(b"\x89PNG")


def test_missing_logo_is_fatal() -> None:
    presenter = ReportPresenter({}, DEFAULT_CONFIG.with_overrides(logo_name="missing.png"))
    with pytest.raises(AssetReadError, match="missing.png"):
        presenter.base64_encoded_logo_image()


def test_severity_colours_and_fade() -> None:
    presenter = _presenter()
    assert str(presenter.severity_color(Severity.ERROR)) == "rgba(210, 50, 45, 1.0)"
    assert presenter.severity_fade(Severity.ERROR).alpha == pytest.approx(0.2)


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, "0 offenses"), (1, "1 offense"), (2, "2 offenses")],
)
def test_pluralize(count: int, expected: str) -> None:
    assert pluralize(count, "offense") == expected


def test_pluralize_no_for_zero() -> None:
    assert pluralize(0, "offense", no_for_zero=True) == "no offenses"
