"""PostgreSQL implementation of Quote repository."""

from typing import Any, List, Optional

import logfire
from sqlalchemy import Text, asc, desc, func, literal, not_, select, update

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
    TextReplacement,
    format_quote_id,
)
from quotevote.persistence.mappers import quote_to_dict, row_to_quote
from quotevote.persistence.repository.base import PostgresRepository
from quotevote.persistence.tables import quotes_table

SORT_COLUMNS = {
    SortField.CREATED_AT: quotes_table.c.created_at,
    SortField.VOTES: quotes_table.c.votes,
    SortField.TEXT: quotes_table.c.text,
    SortField.AUTHOR: quotes_table.c.author,
    SortField.CATEGORY: quotes_table.c.category,
}


def _filter_clause(clause: QuoteFilter) -> Any:
    """Translate a typed filter clause into a WHERE expression."""
    if isinstance(clause, TextPatternFilter):
        # Case-insensitive POSIX regex (~*)
        return quotes_table.c.text.regexp_match(clause.pattern, flags="i")
    if isinstance(clause, CategoryFilter):
        return quotes_table.c.category == clause.category
    raise TypeError(f"Unsupported filter clause: {clause!r}")


class PostgresQuoteRepository(PostgresRepository, QuoteRepository):
    """PostgreSQL implementation of QuoteRepository."""

    async def insert(self, quote: Quote) -> QuoteId:
        """Insert a new quote."""
        with logfire.span(
            "quote_repository.insert", quote_id=format_quote_id(quote.id)
        ):
            stmt = quotes_table.insert().values(**quote_to_dict(quote))
            await self._execute("insert quote", stmt)
            logfire.info("Quote inserted", quote_id=format_quote_id(quote.id))
            return quote.id

    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID."""
        with logfire.span(
            "quote_repository.find_by_id", quote_id=format_quote_id(quote_id)
        ):
            stmt = select(quotes_table).where(quotes_table.c.id == quote_id)
            result = await self._execute("find quote", stmt)
            row = result.fetchone()

            if not row:
                logfire.debug(
                    "Quote row not found", quote_id=format_quote_id(quote_id)
                )
                return None

            return row_to_quote(row._asdict())

    async def find_all(self, query: QuoteQuery) -> List[Quote]:
        """Find quotes matching the query."""
        with logfire.span(
            "quote_repository.find_all",
            sort_field=query.sort_field.value,
            sort_direction=query.sort_direction.value,
            limit=query.limit,
            offset=query.offset,
        ):
            stmt = select(quotes_table)

            for clause in query.filters:
                stmt = stmt.where(_filter_clause(clause))

            order = desc if query.sort_direction == SortDirection.DESC else asc
            stmt = stmt.order_by(
                order(SORT_COLUMNS[query.sort_field]), order(quotes_table.c.id)
            )

            stmt = stmt.limit(query.limit).offset(query.offset)

            result = await self._execute("list quotes", stmt)
            quotes = [row_to_quote(row._asdict()) for row in result.fetchall()]

            logfire.info("Found quotes", count=len(quotes))
            return quotes

    async def conditional_update(
        self, quote_id: QuoteId, mutation: QuoteMutation
    ) -> Optional[Quote]:
        """Apply a mutation in one guarded UPDATE ... RETURNING statement."""
        with logfire.span(
            "quote_repository.conditional_update",
            quote_id=format_quote_id(quote_id),
            mutation=mutation.kind,
        ):
            stmt = update(quotes_table).where(quotes_table.c.id == quote_id)

            if isinstance(mutation, TextReplacement):
                stmt = stmt.where(quotes_table.c.votes == 0).values(text=mutation.text)
            else:
                username = literal(mutation.username, Text)
                already_voted = quotes_table.c.voted_by.contains([mutation.username])
                if mutation.add:
                    stmt = stmt.where(not_(already_voted)).values(
                        votes=quotes_table.c.votes + 1,
                        voted_by=func.array_append(quotes_table.c.voted_by, username),
                    )
                else:
                    stmt = stmt.where(already_voted).values(
                        votes=quotes_table.c.votes - 1,
                        voted_by=func.array_remove(quotes_table.c.voted_by, username),
                    )

            stmt = stmt.returning(*quotes_table.c)
            result = await self._execute("update quote", stmt)
            row = result.fetchone()

            if not row:
                logfire.info(
                    "Conditional update matched no quote",
                    quote_id=format_quote_id(quote_id),
                    mutation=mutation.kind,
                )
                return None

            return row_to_quote(row._asdict())
