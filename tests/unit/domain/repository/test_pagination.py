"""Unit tests for PageParameters and Page."""

import pytest

from accounts.domain.error import ValidationError
from accounts.domain.repository import Page, PageParameters
from accounts.domain.value import SortDirection


class TestPageParameters:
    """Tests for PageParameters validation."""

    def test_defaults(self):
        parameters = PageParameters()

        assert parameters.page == 0
        assert parameters.size == 10
        assert parameters.order_by == "name"
        assert parameters.direction == SortDirection.ASC
        assert parameters.offset == 0
        assert not parameters.descending

    def test_offset(self):
        assert PageParameters(page=3, size=20).offset == 60

    def test_negative_page_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            PageParameters(page=-1)

        assert exc_info.value.field == "page"

    @pytest.mark.parametrize("size", [0, 101])
    def test_size_out_of_range_fails(self, size):
        with pytest.raises(ValidationError) as exc_info:
            PageParameters(size=size)

        assert exc_info.value.field == "size"

    @pytest.mark.parametrize("size", [1, 100])
    def test_size_bounds_accepted(self, size):
        assert PageParameters(size=size).size == size

    def test_unknown_order_by_fails(self):
        with pytest.raises(ValidationError) as exc_info:
            PageParameters(order_by="password")

        assert exc_info.value.field == "order_by"

    def test_descending(self):
        assert PageParameters(direction=SortDirection.DESC).descending


class TestPage:
    """Tests for Page.build() and Page.map()."""

    def test_first_of_two_pages(self):
        page = Page.build(list(range(10)), 15, PageParameters(page=0, size=10))

        assert page.total_pages == 2
        assert page.is_first
        assert not page.is_last

    def test_last_page(self):
        page = Page.build(list(range(5)), 15, PageParameters(page=1, size=10))

        assert page.page_number == 1
        assert not page.is_first
        assert page.is_last

    def test_empty(self):
        page = Page.build([], 0, PageParameters())

        assert page.total_pages == 0
        assert page.is_first
        assert page.is_last

    def test_map_keeps_metadata(self):
        page = Page.build([1, 2, 3], 3, PageParameters(size=3))

        mapped = page.map(str)

        assert mapped.items == ["1", "2", "3"]
        assert mapped.total_items == 3
        assert mapped.is_last
