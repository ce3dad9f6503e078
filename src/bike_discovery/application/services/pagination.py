"""Sorting and page slicing shared by network and station lists."""

import math
from collections.abc import Sequence
from enum import Enum
from typing import Any, TypeVar

from bike_discovery.domain.models.sorting import SortDirection

T = TypeVar("T")

DOTS = "..."


def _numeric_value(item: Any, key: str) -> float:
    """Read a numeric attribute, treating missing or None values as 0."""
    if isinstance(item, dict):
        value = item.get(key)
    else:
        value = getattr(item, key, None)
    return value if value is not None else 0


def sort_by_numeric_key(
    items: Sequence[T],
    key: str | Enum | None,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[T]:
    """Sort items by a numeric attribute.

    Without a key the items are returned as a new list in their original order.
    The sort is stable in both directions: exact ties keep their relative order.
    """
    if not key:
        return list(items)

    attribute = key.value if isinstance(key, Enum) else key
    descending = SortDirection(direction) == SortDirection.DESC
    return sorted(items, key=lambda item: _numeric_value(item, attribute), reverse=descending)


def normalize_page_number(page_number: Any) -> int:
    """Return page_number as a 1-based int, using 1 for anything unusable."""
    if isinstance(page_number, bool) or not isinstance(page_number, int | float):
        return 1
    if isinstance(page_number, float) and not math.isfinite(page_number):
        return 1
    return max(1, int(page_number))


def paginate(items: Sequence[T], page_number: Any, page_size: int) -> list[T]:
    """Return the slice of items on a 1-based page.

    Non-numeric or non-positive page numbers are treated as page 1. A page past the
    end, or a non-positive page size, yields an empty list.
    """
    if page_size <= 0:
        return []
    start = (normalize_page_number(page_number) - 1) * page_size
    return list(items[start : start + page_size])


def total_pages(total_items: int, page_size: int) -> int:
    """Return the number of pages needed to show total_items, or 0 for invalid input."""
    if total_items <= 0 or page_size <= 0:
        return 0
    return math.ceil(total_items / page_size)


def pagination_range(
    current_page: int, total_page_count: int, sibling_count: int = 1
) -> list[int | str]:
    """Build the page-number strip shown under a paginated list.

    Pages far from the current one are collapsed into ``DOTS``. The first and last
    page are always shown, as are ``sibling_count`` pages on each side of the
    current page.
    """
    if total_page_count <= 0:
        return []

    # first + last + current + two DOTS + siblings
    total_page_numbers = sibling_count + 5
    if total_page_numbers >= total_page_count:
        return list(range(1, total_page_count + 1))

    left_sibling = max(current_page - sibling_count, 1)
    right_sibling = min(current_page + sibling_count, total_page_count)

    show_left_dots = left_sibling > 2
    show_right_dots = right_sibling < total_page_count - 1

    if not show_left_dots and show_right_dots:
        left_count = 3 + 2 * sibling_count
        return [*range(1, left_count + 1), DOTS, total_page_count]

    if show_left_dots and not show_right_dots:
        right_count = 3 + 2 * sibling_count
        return [1, DOTS, *range(total_page_count - right_count + 1, total_page_count + 1)]

    if show_left_dots and show_right_dots:
        return [1, DOTS, *range(left_sibling, right_sibling + 1), DOTS, total_page_count]

    return list(range(1, total_page_count + 1))
