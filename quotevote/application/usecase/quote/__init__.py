"""Quote use cases."""

from .add_quote import AddQuoteRequest, AddQuoteResponse, AddQuoteUseCase
from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_quote import GetQuoteRequest, GetQuoteUseCase
from .list_quotes import ListQuotesRequest, ListQuotesResponse, ListQuotesUseCase
from .update_quote import UpdateQuoteRequest, UpdateQuoteResponse, UpdateQuoteUseCase
from .view import QuoteView

__all__ = [
    "AddQuoteRequest",
    "AddQuoteResponse",
    "AddQuoteUseCase",
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetQuoteRequest",
    "GetQuoteUseCase",
    "ListQuotesRequest",
    "ListQuotesResponse",
    "ListQuotesUseCase",
    "QuoteView",
    "UpdateQuoteRequest",
    "UpdateQuoteResponse",
    "UpdateQuoteUseCase",
]
