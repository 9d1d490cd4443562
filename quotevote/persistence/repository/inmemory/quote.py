"""In-memory quote repository for testing."""

import re
from typing import Any, List, Optional

from quotevote.domain.error import StoreError
from quotevote.domain.model import Quote
from quotevote.domain.repository.quote import QuoteRepository
from quotevote.domain.value import (
    CategoryFilter,
    QuoteFilter,
    QuoteId,
    QuoteMutation,
    QuoteQuery,
    SortDirection,
    SortField,
    TextPatternFilter,
)

SORT_ATTRIBUTES = {
    SortField.CREATED_AT: "created_at",
    SortField.VOTES: "votes",
    SortField.TEXT: "text",
    SortField.AUTHOR: "author",
    SortField.CATEGORY: "category",
}


def _matches(quote: Quote, clause: QuoteFilter) -> bool:
    if isinstance(clause, TextPatternFilter):
        try:
            return re.search(clause.pattern, quote.text, re.IGNORECASE) is not None
        except re.error as e:
            raise StoreError("list quotes", f"invalid search pattern: {e}")
    if isinstance(clause, CategoryFilter):
        return quote.category == clause.category
    raise TypeError(f"Unsupported filter clause: {clause!r}")


def _sort_key(field: SortField):
    attribute = SORT_ATTRIBUTES[field]

    def key(quote: Quote) -> tuple[Any, ...]:
        value = getattr(quote, attribute)
        # Missing values sort after present ones, as in PostgreSQL
        return (value is None, value if value is not None else "", quote.id.hex)

    return key


class InMemoryQuoteRepository(QuoteRepository):
    """In-memory implementation of QuoteRepository for testing.

    Check-and-write in ``conditional_update`` runs without yielding to the
    event loop, so concurrent coroutines observe it as a single step.
    """

    def __init__(self) -> None:
        self._quotes: dict[QuoteId, Quote] = {}

    async def insert(self, quote: Quote) -> QuoteId:
        """Insert a new quote."""
        if quote.id in self._quotes:
            raise StoreError("insert quote", "duplicate id")
        self._quotes[quote.id] = quote
        return quote.id

    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID."""
        return self._quotes.get(quote_id)

    async def find_all(self, query: QuoteQuery) -> List[Quote]:
        """Find quotes matching the query."""
        quotes = [
            quote
            for quote in self._quotes.values()
            if all(_matches(quote, clause) for clause in query.filters)
        ]
        quotes.sort(
            key=_sort_key(query.sort_field),
            reverse=query.sort_direction == SortDirection.DESC,
        )
        return quotes[query.offset : query.offset + query.limit]

    async def conditional_update(
        self, quote_id: QuoteId, mutation: QuoteMutation
    ) -> Optional[Quote]:
        """Apply the mutation if the quote exists and still accepts it."""
        quote = self._quotes.get(quote_id)
        if quote is None or not quote.accepts(mutation):
            return None

        updated = quote.apply(mutation)
        self._quotes[quote_id] = updated
        return updated
