"""Add quote use case."""

from typing import Optional

from pydantic import BaseModel

from quotevote.application.usecase.base import BaseUseCase
from quotevote.domain.service import QuoteService

from .view import QuoteView


class AddQuoteRequest(BaseModel):
    """Add quote request."""

    text: str
    author: Optional[str] = None
    category: Optional[str] = None


class AddQuoteResponse(BaseModel):
    """Add quote response."""

    message: str = "Quote added"
    quote: QuoteView


class AddQuoteUseCase(BaseUseCase[AddQuoteRequest, AddQuoteResponse]):
    """Use case for submitting a new quote."""

    def __init__(self, quote_service: QuoteService) -> None:
        """Initialize add quote use case.

        Args:
            quote_service: Quote domain service
        """
        self.quote_service = quote_service

    async def execute(self, request: AddQuoteRequest) -> AddQuoteResponse:
        """Execute add quote flow.

        Args:
            request: Quote text and optional author/category

        Returns:
            The created quote

        Raises:
            ValidationError: If the text is empty
        """
        quote = await self.quote_service.add_quote(
            text=request.text,
            author=request.author,
            category=request.category,
        )
        return AddQuoteResponse(quote=QuoteView.from_domain(quote))
