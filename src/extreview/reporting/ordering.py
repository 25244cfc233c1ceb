# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Order rule buckets by department importance, then by rule name."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, TypeAlias, TypeVar

from ..core.models import department_of, rule_name_of

ValueT = TypeVar("ValueT")

UNRANKED_DEPARTMENT: Final[int] = -1

SortKey: TypeAlias = tuple[int, int, str, str, str]


def category_sort_key(rule_id: str, department_order: Sequence[str]) -> SortKey:
    """Return the sort key placing ``rule_id`` in the report.

    Ranked departments come first in priority order. Departments missing from
    ``department_order`` follow them, grouped alphabetically by name. The full
    rule identifier breaks any remaining tie, so the order never depends on
    arrival order.

    Args:
        rule_id: Namespaced rule identifier.
        department_order: Department names, most important first.

    Returns:
        SortKey: ``(bucket, rank, department, rule_name, rule_id)`` tuple.
    """

    department = department_of(rule_id)
    try:
        rank = department_order.index(department)
    except ValueError:
        return (1, UNRANKED_DEPARTMENT, department, rule_name_of(rule_id), rule_id)
    return (0, rank, department, rule_name_of(rule_id), rule_id)


def sort_categories(
    categories: Mapping[str, ValueT],
    department_order: Sequence[str],
) -> dict[str, ValueT]:
    """Return ``categories`` re-ordered for rendering.

    Args:
        categories: Values keyed by rule identifier.
        department_order: Department names, most important first.

    Returns:
        dict[str, ValueT]: New mapping whose insertion order is the report order.
    """

    ordered = sorted(categories, key=lambda rule_id: category_sort_key(rule_id, department_order))
    return {rule_id: categories[rule_id] for rule_id in ordered}


__all__ = ["SortKey", "category_sort_key", "sort_categories"]
