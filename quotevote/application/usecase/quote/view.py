"""Serialized form of a quote shared by the quote use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from quotevote.domain.model import Quote
from quotevote.domain.value import format_quote_id


class QuoteView(BaseModel):
    """Quote as returned to clients (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    text: str
    author: str
    category: Optional[str]
    created_at: datetime
    votes: int
    voted_by: list[str]

    @classmethod
    def from_domain(cls, quote: Quote) -> "QuoteView":
        """Build the view from a quote snapshot."""
        return cls(
            id=format_quote_id(quote.id),
            text=quote.text,
            author=quote.author,
            category=quote.category,
            created_at=quote.created_at,
            votes=quote.votes,
            voted_by=sorted(quote.voted_by),
        )
