"""Strongly typed identifiers for Quote Vote domain entities.

Quote ids travel over the wire as 32-character lowercase hex strings
(``uuid.hex``); the canonical hyphenated UUID form is accepted on input.
"""

import re
from typing import NewType
from uuid import UUID

from quotevote.domain.error import ValidationError

QuoteId = NewType("QuoteId", UUID)
UserId = NewType("UserId", UUID)

_HEX_ID = re.compile(r"^[0-9a-fA-F]{32}$")
_CANONICAL_ID = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)


def parse_quote_id(raw: str) -> QuoteId:
    """Parse an external quote identifier.

    Args:
        raw: Hex (or canonical UUID) string from the client

    Returns:
        Typed quote id

    Raises:
        ValidationError: If the string is not a valid identifier
    """
    value = raw.strip() if raw else ""
    if not (_HEX_ID.match(value) or _CANONICAL_ID.match(value)):
        raise ValidationError("invalid quote id")
    return QuoteId(UUID(value))


def format_quote_id(quote_id: QuoteId) -> str:
    """Render a quote id in its external hex form."""
    return quote_id.hex
