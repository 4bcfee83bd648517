"""
Unit tests for pagination utilities.

Covers the conversion between UI pages and upstream item indexes, page counts
and the URL encoding of the page position.
"""

import pytest

from modcatalog_client.models.pagination import PageRequest
from modcatalog_client.utils.pagination import (
    build_pagination_params,
    can_go_next,
    can_go_previous,
    on_dimension_change,
    page_index_from_api_index,
    parse_pagination_params,
    to_api_index,
    to_total_pages,
)


class TestToApiIndex:
    """Test cases for to_api_index."""

    @pytest.mark.parametrize(
        "page_index,page_size,expected",
        [(0, 20, 0), (1, 10, 10), (2, 20, 40), (7, 50, 350)],
    )
    def test_index_is_page_times_size(self, page_index, page_size, expected):
        page = PageRequest(page_index=page_index, page_size=page_size)

        assert to_api_index(page) == expected

    def test_accepts_camel_case_aliases(self):
        page = PageRequest(pageIndex=3, pageSize=10)

        assert to_api_index(page) == 30


class TestToTotalPages:
    """Test cases for to_total_pages."""

    @pytest.mark.parametrize(
        "total_count,page_size,expected",
        [(45, 20, 3), (40, 20, 2), (41, 20, 3), (1, 50, 1), (100, 10, 10), (9, 10, 1)],
    )
    def test_ceiling_division(self, total_count, page_size, expected):
        assert to_total_pages(total_count, page_size) == expected

    def test_zero_items_is_zero_pages(self):
        assert to_total_pages(0, 20) == 0

    def test_zero_page_size_is_guarded(self):
        assert to_total_pages(45, 0) == 0


class TestOnDimensionChange:
    """Test cases for on_dimension_change."""

    def test_resets_index_and_keeps_size(self):
        page = PageRequest(page_index=4, page_size=50)

        reset = on_dimension_change(page)

        assert reset.page_index == 0
        assert reset.page_size == 50
        assert page.page_index == 4  # original untouched


class TestNavigationBounds:
    """Test cases for can_go_next / can_go_previous."""

    def test_last_page_disables_next(self):
        assert can_go_next(2, 3) is False
        assert can_go_previous(2) is True

    def test_first_page_disables_previous(self):
        assert can_go_previous(0) is False
        assert can_go_next(0, 3) is True

    @pytest.mark.parametrize("total_pages", [0, 1])
    def test_single_or_no_page_disables_both(self, total_pages):
        assert can_go_next(0, total_pages) is False
        assert can_go_previous(0) is False

    def test_disabled_blocks_both(self):
        assert can_go_next(1, 5, disabled=True) is False
        assert can_go_previous(1, disabled=True) is False


class TestParsePaginationParams:
    """Test cases for parse_pagination_params."""

    def test_numeric_strings(self):
        page = parse_pagination_params({"index": "40", "pageSize": "20"})

        assert page.page_index == 2
        assert page.page_size == 20

    def test_ints(self):
        page = parse_pagination_params({"index": 100, "pageSize": 50})

        assert page.page_index == 2
        assert page.page_size == 50

    def test_missing_values_use_defaults(self):
        page = parse_pagination_params({})

        assert page.page_index == 0
        assert page.page_size == 20

    def test_invalid_values_use_defaults(self):
        page = parse_pagination_params({"index": "abc", "pageSize": "lots"})

        assert page.page_index == 0
        assert page.page_size == 20

    @pytest.mark.parametrize("index", ["40.0", 40.0, "4e1"])
    def test_float_like_index_uses_default(self, index):
        page = parse_pagination_params({"index": index, "pageSize": "20"})

        assert page.page_index == 0
        assert page.page_size == 20

    def test_negative_values_use_defaults(self):
        page = parse_pagination_params({"index": "-10", "pageSize": "-5"})

        assert page.page_index == 0
        assert page.page_size == 20

    def test_page_size_outside_options_uses_default(self):
        page = parse_pagination_params(
            {"index": "30", "pageSize": "30"}, page_size_options=[10, 20, 50]
        )

        assert page.page_size == 20
        assert page.page_index == 1

    def test_unaligned_index_rounds_down(self):
        assert page_index_from_api_index(45, 20) == 2


class TestUrlRoundTrip:
    """Encoding a page position into the URL and reading it back."""

    @pytest.mark.parametrize(
        "page_index,page_size", [(0, 10), (2, 20), (5, 50), (13, 10)]
    )
    def test_round_trip(self, page_index, page_size):
        page = PageRequest(page_index=page_index, page_size=page_size)

        encoded = build_pagination_params(page)
        decoded = parse_pagination_params(encoded)

        assert encoded == {"index": str(page_index * page_size), "pageSize": str(page_size)}
        assert decoded == page
