"""List quotes use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import ListingQueryBuilder, QuoteService

from .view import QuoteView


class ListQuotesRequest(BaseModel):
    """List quotes request.

    Parameters are kept as the raw client strings; normalization happens in
    the listing query builder.
    """

    limit: Optional[str] = None
    page: Optional[str] = None
    search: Optional[str] = None
    category: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None


class ListQuotesResponse(BaseModel):
    """List quotes response."""

    quotes: list[QuoteView]


class ListQuotesUseCase(BaseUseCase[ListQuotesRequest, ListQuotesResponse]):
    """Use case for browsing, searching and sorting quotes."""

    def __init__(
        self, quote_service: QuoteService, query_builder: ListingQueryBuilder
    ) -> None:
        """Initialize list quotes use case.

        Args:
            quote_service: Quote domain service
            query_builder: Listing query builder
        """
        self.quote_service = quote_service
        self.query_builder = query_builder

    async def execute(self, request: ListQuotesRequest) -> ListQuotesResponse:
        """Execute list quotes flow.

        Args:
            request: Raw listing parameters

        Returns:
            Matching quotes in the resolved order (possibly empty)

        Raises:
            StoreError: If the store cannot execute the query
        """
        query = self.query_builder.build(
            limit=request.limit,
            page=request.page,
            search=request.search,
            category=request.category,
            sort_by=request.sort_by,
            sort_order=request.sort_order,
        )

        with logfire.span(
            "list_quotes.execute",
            filters=len(query.filters),
            sort_field=query.sort_field.value,
            limit=query.limit,
            offset=query.offset,
        ):
            quotes = await self.quote_service.list_quotes(query)
            return ListQuotesResponse(
                quotes=[QuoteView.from_domain(quote) for quote in quotes]
            )
