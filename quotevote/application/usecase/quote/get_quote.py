"""Get quote use case."""

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import QuoteService
from quotevote.domain.value import parse_quote_id

from .view import QuoteView


class GetQuoteRequest(BaseModel):
    """Get quote request."""

    quote_id: str


class GetQuoteUseCase(BaseUseCase[GetQuoteRequest, QuoteView]):
    """Use case for reading a single quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        self.quote_service = quote_service

    async def execute(self, request: GetQuoteRequest) -> QuoteView:
        """Fetch one quote by its external id.

        Raises:
            ValidationError: If the id is malformed
            NotFoundError: If no quote has this id
        """
        quote_id = parse_quote_id(request.quote_id)
        quote = await self.quote_service.get_quote(quote_id)
        return QuoteView.from_domain(quote)
