# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for department-aware category ordering."""

from __future__ import annotations

from extreview.config import DEFAULT_DEPARTMENT_ORDER
from extreview.reporting.ordering import category_sort_key, sort_categories


def test_department_rank_then_rule_name() -> None:
    categories = {"A/z": 1, "B/a": 2, "A/a": 3}
    ordered = sort_categories(categories, ["A", "B"])

    assert list(ordered) == ["A/a", "A/z", "B/a"]
    assert ordered["A/z"] == 1


def test_priority_list_overrides_alphabetical_department_order() -> None:
    categories = {
        "SketchupPerformance/TypeCheck": (),
        "SketchupSuggestions/Compatibility": (),
        "SketchupRequirements/Foo": (),
        "SketchupDeprecations/OperationNext": (),
    }
    ordered = sort_categories(categories, DEFAULT_DEPARTMENT_ORDER)

    assert list(ordered) == [
        "SketchupRequirements/Foo",
        "SketchupDeprecations/OperationNext",
        "SketchupPerformance/TypeCheck",
        "SketchupSuggestions/Compatibility",
    ]


def test_unknown_departments_sort_after_ranked_ones() -> None:
    categories = {"Zeta/b": 0, "Lint/a": 0, "B/x": 0, "Zeta/a": 0, "A/y": 0}
    ordered = sort_categories(categories, ["B", "A"])

    assert list(ordered) == ["B/x", "A/y", "Lint/a", "Zeta/a", "Zeta/b"]


def test_sorting_does_not_mutate_input() -> None:
    categories = {"B/a": 0, "A/a": 0}
    sort_categories(categories, ["A", "B"])

    assert list(categories) == ["B/a", "A/a"]


def test_sort_is_deterministic_regardless_of_arrival_order() -> None:
    forward = sort_categories({"A/z": 0, "A/a": 0, "C/q": 0, "B/a": 0}, ["A", "B"])
    backward = sort_categories({"B/a": 0, "C/q": 0, "A/a": 0, "A/z": 0}, ["A", "B"])

    assert list(forward) == list(backward) == ["A/a", "A/z", "B/a", "C/q"]


def test_sort_key_distinguishes_ranked_and_unranked() -> None:
    assert category_sort_key("A/x", ["A"]) < category_sort_key("B/a", ["A"])
    assert category_sort_key("A/x", ["A"])[0] == 0
    assert category_sort_key("B/a", ["A"])[0] == 1


def test_rule_ids_sharing_department_and_name_sort_by_full_identifier() -> None:
    forward = sort_categories({"A/": 1, "A": 2}, ["A"])
    backward = sort_categories({"A": 2, "A/": 1}, ["A"])

    assert list(forward) == list(backward) == ["A", "A/"]
    assert category_sort_key("A", ["A"]) != category_sort_key("A/", ["A"])
