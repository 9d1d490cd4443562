"""Update quote use case."""

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import QuoteService
from quotevote.domain.value import parse_quote_id

from .view import QuoteView


class UpdateQuoteRequest(BaseModel):
    """Update quote request."""

    quote_id: str
    text: str


class UpdateQuoteResponse(BaseModel):
    """Update quote response."""

    message: str = "Quote updated successfully"
    quote: QuoteView


class UpdateQuoteUseCase(BaseUseCase[UpdateQuoteRequest, UpdateQuoteResponse]):
    """Use case for replacing the text of an unvoted quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize update quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: UpdateQuoteRequest) -> UpdateQuoteResponse:
        """Execute update flow.

        Args:
            request: Target quote and replacement text

        Returns:
            The updated quote

        Raises:
            ValidationError: If the id is malformed or the text is empty
            NotFoundError: If the quote does not exist
            ConflictError: If the quote already has votes
        """
        quote_id = parse_quote_id(request.quote_id)
        quote = await self.quote_service.update_quote_text(quote_id, request.text)
        return UpdateQuoteResponse(quote=QuoteView.from_domain(quote))
