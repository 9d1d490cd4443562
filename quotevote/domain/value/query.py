"""Typed listing query plan.

A ``QuoteQuery`` is what the listing query builder hands to a quote
repository. Filters are tagged clauses and the sort is an enum pair, so only
known field names ever reach the store.
"""

from typing import Literal, Union

from pydantic import Field

from quotevote.domain.value.common import ValueObject
from quotevote.domain.value.types import SortDirection, SortField


class TextPatternFilter(ValueObject):
    """Case-insensitive regular expression match against quote text."""

    kind: Literal["text_pattern"] = "text_pattern"
    pattern: str = Field(min_length=1)


class CategoryFilter(ValueObject):
    """Exact category match."""

    kind: Literal["category"] = "category"
    category: str = Field(min_length=1)


QuoteFilter = Union[TextPatternFilter, CategoryFilter]


class QuoteQuery(ValueObject):
    """Bounded listing query.

    All filters must match (conjunction). ``offset`` is derived from the
    1-indexed page by the builder.
    """

    filters: tuple[QuoteFilter, ...] = ()
    sort_field: SortField = SortField.CREATED_AT
    sort_direction: SortDirection = SortDirection.DESC
    limit: int = Field(default=10, ge=1)
    offset: int = Field(default=0, ge=0)
