"""Listing query builder.

Turns raw client listing parameters into a typed ``QuoteQuery``. The builder
never rejects input: invalid pagination falls back to defaults, unknown sort
fields fall back to ``createdAt`` and only ``"desc"`` selects descending order.
"""

from typing import Optional, Union

import logfire

from quotevote.config import ListingSettings
from quotevote.domain.value import (
    CategoryFilter,
    QuoteFilter,
    QuoteQuery,
    SortDirection,
    SortField,
    TextPatternFilter,
)

from .base import Service

RawParam = Union[str, int, None]


class ListingQueryBuilder(Service):
    """Builds bounded quote listing queries."""

    def __init__(self, listing_settings: ListingSettings) -> None:
        """Initialize query builder.

        Args:
            listing_settings: Listing defaults and optional page size cap
        """
        self.listing_settings = listing_settings

    def build(
        self,
        limit: RawParam = None,
        page: RawParam = None,
        search: Optional[str] = None,
        category: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> QuoteQuery:
        """Build a listing query from client parameters.

        Args:
            limit: Page size; non-positive or unparsable resets to the default
            page: 1-indexed page; non-positive or unparsable resets to the default
            search: Case-insensitive pattern matched against quote text
            category: Exact category match
            sort_by: External field name to sort by
            sort_order: "desc" for descending, anything else ascending

        Returns:
            Normalized query plan
        """
        resolved_limit = self._positive_int(limit, self.listing_settings.default_limit)
        max_limit = self.listing_settings.max_limit
        if max_limit is not None and resolved_limit > max_limit:
            resolved_limit = max_limit

        resolved_page = self._positive_int(page, self.listing_settings.default_page)

        filters: list[QuoteFilter] = []
        if search:
            filters.append(TextPatternFilter(pattern=search))
        if category:
            filters.append(CategoryFilter(category=category))

        query = QuoteQuery(
            filters=tuple(filters),
            sort_field=self._sort_field(sort_by),
            sort_direction=self._sort_direction(sort_order),
            limit=resolved_limit,
            offset=(resolved_page - 1) * resolved_limit,
        )

        logfire.debug(
            "Listing query built",
            limit=query.limit,
            offset=query.offset,
            sort_field=query.sort_field.value,
            sort_direction=query.sort_direction.value,
            filter_count=len(query.filters),
        )
        return query

    @staticmethod
    def _positive_int(raw: RawParam, default: int) -> int:
        """Parse a positive integer, falling back to ``default``."""
        if raw is None or isinstance(raw, bool):
            return default
        try:
            value = int(raw)
        except (TypeError, ValueError):
            return default
        return value if value > 0 else default

    @staticmethod
    def _sort_field(raw: Optional[str]) -> SortField:
        """Resolve an external field name, defaulting to createdAt."""
        if not raw:
            return SortField.CREATED_AT
        try:
            return SortField(raw)
        except ValueError:
            logfire.debug("Unknown sort field, using createdAt", sort_by=raw)
            return SortField.CREATED_AT

    @staticmethod
    def _sort_direction(raw: Optional[str]) -> SortDirection:
        """Resolve the sort direction.

        Absent means descending. A present value other than "desc", the empty
        string included, is ascending.
        """
        if raw is None or raw == "desc":
            return SortDirection.DESC
        return SortDirection.ASC
