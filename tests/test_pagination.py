"""Tests for sorting and paging."""

import math
from collections.abc import Callable

import pytest

from bike_discovery.application.services.pagination import (
    DOTS,
    paginate,
    pagination_range,
    sort_by_numeric_key,
    total_pages,
)
from bike_discovery.domain.models import SortDirection, Station, StationSortKey

StationFactory = Callable[..., Station]


def ids(items: list[Station]) -> list[str]:
    return [s.id for s in items]


@pytest.fixture
def stations(make_station: StationFactory) -> list[Station]:
    """Stations with a tie and a missing count."""
    return [
        make_station("a", free_bikes=3, empty_slots=1),
        make_station("b", free_bikes=None, empty_slots=5),
        make_station("c", free_bikes=7, empty_slots=0),
        make_station("d", free_bikes=3, empty_slots=2),
    ]


class TestSortByNumericKey:
    """Tests for sort_by_numeric_key."""

    def test_without_key_returns_copy_in_original_order(self, stations: list[Station]) -> None:
        """Given no key, when sorting, then a new list in input order is returned."""
        result = sort_by_numeric_key(stations, None)

        assert result == stations
        assert result is not stations

    def test_ascending_with_missing_as_zero_and_stable_ties(
        self, stations: list[Station]
    ) -> None:
        """Given a missing count and a tie, when sorting asc, then None is 0 and ties keep order."""
        result = sort_by_numeric_key(stations, StationSortKey.FREE_BIKES, SortDirection.ASC)

        assert ids(result) == ["b", "a", "d", "c"]

    def test_descending_keeps_tie_order(self, stations: list[Station]) -> None:
        """Given a tie, when sorting desc, then tied items keep their relative order."""
        result = sort_by_numeric_key(stations, StationSortKey.FREE_BIKES, SortDirection.DESC)

        assert ids(result) == ["c", "a", "d", "b"]

    def test_accepts_plain_strings(self, stations: list[Station]) -> None:
        """Given string key and direction, when sorting, then they behave like the enums."""
        result = sort_by_numeric_key(stations, "empty_slots", "desc")

        assert ids(result) == ["b", "d", "a", "c"]

    def test_sorting_twice_is_idempotent(self, stations: list[Station]) -> None:
        """Given a sorted list, when sorting again the same way, then nothing changes."""
        once = sort_by_numeric_key(stations, StationSortKey.FREE_BIKES, SortDirection.ASC)
        twice = sort_by_numeric_key(once, StationSortKey.FREE_BIKES, SortDirection.ASC)

        assert twice == once

    def test_input_is_not_mutated(self, stations: list[Station]) -> None:
        """Given a list, when sorting, then the input order is unchanged."""
        sort_by_numeric_key(stations, StationSortKey.EMPTY_SLOTS, SortDirection.ASC)

        assert ids(stations) == ["a", "b", "c", "d"]

    def test_sorts_mappings(self) -> None:
        """Given dicts, when sorting, then keys are read from the mapping."""
        rows = [{"free_bikes": 2}, {"free_bikes": None}, {"free_bikes": 1}]

        result = sort_by_numeric_key(rows, "free_bikes")

        assert [r["free_bikes"] for r in result] == [None, 1, 2]


class TestPaginate:
    """Tests for paginate and total_pages."""

    def test_last_partial_page(self) -> None:
        """Given 37 items, when taking page 3 of 15, then items 31..37 are returned."""
        items = list(range(1, 38))

        assert paginate(items, 3, 15) == list(range(31, 38))
        assert total_pages(37, 15) == 3

    def test_pages_partition_items(self) -> None:
        """Given any page size, when concatenating all pages, then the input is rebuilt."""
        items = list(range(23))
        for size in (1, 4, 5, 23, 30):
            pages = [paginate(items, p, size) for p in range(1, total_pages(len(items), size) + 1)]

            assert [x for page in pages for x in page] == items
            assert total_pages(len(items), size) == math.ceil(len(items) / size)

    @pytest.mark.parametrize("page_number", [0, -3, None, "abc", math.nan, True])
    def test_invalid_page_numbers_mean_first_page(self, page_number: object) -> None:
        """Given an unusable page number, when paging, then page 1 is returned."""
        assert paginate([1, 2, 3, 4], page_number, 2) == [1, 2]

    def test_page_beyond_last_is_empty(self) -> None:
        """Given a page past the end, when paging, then an empty list is returned."""
        assert paginate([1, 2, 3], 5, 2) == []

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size_is_empty(self, page_size: int) -> None:
        """Given a non-positive page size, when paging, then an empty list is returned."""
        assert paginate([1, 2, 3], 1, page_size) == []

    @pytest.mark.parametrize(("total", "size"), [(0, 10), (-1, 10), (10, 0), (10, -2)])
    def test_total_pages_invalid_input_is_zero(self, total: int, size: int) -> None:
        """Given no items or a non-positive size, when counting pages, then 0 is returned."""
        assert total_pages(total, size) == 0

    def test_total_pages_exact_multiple(self) -> None:
        """Given 30 items in pages of 15, when counting pages, then there are 2."""
        assert total_pages(30, 15) == 2


class TestPaginationRange:
    """Tests for the page-number strip."""

    def test_few_pages_shows_all(self) -> None:
        """Given fewer pages than slots, when building the strip, then every page is shown."""
        assert pagination_range(2, 5) == [1, 2, 3, 4, 5]

    def test_near_start_shows_right_dots(self) -> None:
        """Given the first page of ten, when building the strip, then dots precede the last page."""
        assert pagination_range(1, 10) == [1, 2, 3, 4, 5, DOTS, 10]

    def test_near_end_shows_left_dots(self) -> None:
        """Given the last page of ten, when building the strip, then dots follow the first page."""
        assert pagination_range(10, 10) == [1, DOTS, 6, 7, 8, 9, 10]

    def test_middle_shows_both_dots(self) -> None:
        """Given a middle page, when building the strip, then siblings sit between two dots."""
        assert pagination_range(5, 10) == [1, DOTS, 4, 5, 6, DOTS, 10]

    def test_wider_sibling_count(self) -> None:
        """Given two siblings, when building the strip, then two pages show on each side."""
        assert pagination_range(10, 20, sibling_count=2) == [1, DOTS, 8, 9, 10, 11, 12, DOTS, 20]

    def test_no_pages(self) -> None:
        """Given zero pages, when building the strip, then it is empty."""
        assert pagination_range(1, 0) == []
