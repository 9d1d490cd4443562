"""Domain value objects for Quote Vote."""

from quotevote.domain.value.identifiers import (
    QuoteId,
    UserId,
    format_quote_id,
    parse_quote_id,
)
from quotevote.domain.value.mutation import (
    QuoteMutation,
    TextReplacement,
    VoterSetChange,
)
from quotevote.domain.value.query import (
    CategoryFilter,
    QuoteFilter,
    QuoteQuery,
    TextPatternFilter,
)
from quotevote.domain.value.types import (
    ANONYMOUS_AUTHOR,
    SortDirection,
    SortField,
    Username,
    VoteAction,
    VoteState,
)

__all__ = [
    # Identifiers
    "QuoteId",
    "UserId",
    "format_quote_id",
    "parse_quote_id",
    # Types
    "ANONYMOUS_AUTHOR",
    "SortDirection",
    "SortField",
    "Username",
    "VoteAction",
    "VoteState",
    # Listing queries
    "CategoryFilter",
    "QuoteFilter",
    "QuoteQuery",
    "TextPatternFilter",
    # Mutations
    "QuoteMutation",
    "TextReplacement",
    "VoterSetChange",
]
