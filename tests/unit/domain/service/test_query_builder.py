"""Unit tests for ListingQueryBuilder."""

import pytest

from quotevote.config import ListingSettings
from quotevote.domain.service import ListingQueryBuilder
from quotevote.domain.value import (
    CategoryFilter,
    SortDirection,
    SortField,
    TextPatternFilter,
)


@pytest.fixture
def builder():
    return ListingQueryBuilder(listing_settings=ListingSettings())


class TestPagination:
    """Pagination parameters are normalized, never rejected."""

    def test_defaults(self, builder):
        query = builder.build()

        assert query.limit == 10
        assert query.offset == 0
        assert query.filters == ()
        assert query.sort_field == SortField.CREATED_AT
        assert query.sort_direction == SortDirection.DESC

    def test_offset_from_page(self, builder):
        query = builder.build(limit="2", page="2")

        assert query.limit == 2
        assert query.offset == 2

    def test_non_positive_values_fall_back_to_defaults(self, builder):
        """limit=-5, page=0 behaves exactly like limit=10, page=1."""
        assert builder.build(limit="-5", page="0") == builder.build(
            limit="10", page="1"
        )

    @pytest.mark.parametrize("raw", ["abc", "1.5", "", " ", None])
    def test_unparsable_values_fall_back_to_defaults(self, builder, raw):
        query = builder.build(limit=raw, page=raw)

        assert query.limit == 10
        assert query.offset == 0

    def test_large_limit_is_unbounded_by_default(self, builder):
        assert builder.build(limit="5000").limit == 5000

    def test_large_limit_clamped_when_cap_configured(self):
        builder = ListingQueryBuilder(listing_settings=ListingSettings(max_limit=50))

        query = builder.build(limit="5000", page="3")

        assert query.limit == 50
        assert query.offset == 100


class TestFilters:
    def test_search_and_category_combine(self, builder):
        query = builder.build(search="life", category="wisdom")

        assert query.filters == (
            TextPatternFilter(pattern="life"),
            CategoryFilter(category="wisdom"),
        )

    def test_empty_strings_mean_no_filter(self, builder):
        assert builder.build(search="", category="").filters == ()


class TestSorting:
    @pytest.mark.parametrize(
        "sort_by, expected",
        [
            ("votes", SortField.VOTES),
            ("text", SortField.TEXT),
            ("author", SortField.AUTHOR),
            ("category", SortField.CATEGORY),
            ("createdAt", SortField.CREATED_AT),
        ],
    )
    def test_known_sort_fields(self, builder, sort_by, expected):
        assert builder.build(sort_by=sort_by).sort_field == expected

    @pytest.mark.parametrize("sort_by", ["votedBy", "$where", "created_at", ""])
    def test_unknown_sort_field_falls_back_to_created_at(self, builder, sort_by):
        assert builder.build(sort_by=sort_by).sort_field == SortField.CREATED_AT

    @pytest.mark.parametrize(
        "sort_order, expected",
        [
            (None, SortDirection.DESC),
            ("", SortDirection.ASC),
            ("desc", SortDirection.DESC),
            ("asc", SortDirection.ASC),
            ("DESC", SortDirection.ASC),
            ("sideways", SortDirection.ASC),
        ],
    )
    def test_sort_direction(self, builder, sort_order, expected):
        assert builder.build(sort_order=sort_order).sort_direction == expected

    def test_present_but_empty_sort_order_is_ascending(self, builder):
        """Only an absent sortOrder takes the descending default."""
        assert builder.build(sort_order="").sort_direction == SortDirection.ASC
        assert builder.build().sort_direction == SortDirection.DESC
