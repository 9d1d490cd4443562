"""Quote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quotevote.domain.model.quote import Quote
from quotevote.domain.value import QuoteId, QuoteMutation, QuoteQuery


class QuoteRepository(ABC):
    """Repository for the Quote aggregate.

    Defines the contract for quote persistence operations.
    Implementations live in the persistence layer. Every method may raise
    ``StoreError`` (``StoreTimeoutError`` when the store timeout is exceeded).
    """

    @abstractmethod
    async def insert(self, quote: Quote) -> QuoteId:
        """Store a new quote.

        Args:
            quote: The quote to store

        Returns:
            The stored quote's identifier
        """
        pass

    @abstractmethod
    async def find_by_id(self, quote_id: QuoteId) -> Optional[Quote]:
        """Find a quote by ID.

        Args:
            quote_id: The quote's unique identifier

        Returns:
            The quote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, query: QuoteQuery) -> List[Quote]:
        """Find quotes matching a listing query.

        Args:
            query: Filters, sort and page bounds

        Returns:
            At most ``query.limit`` quotes, skipping ``query.offset``

        Raises:
            StoreError: If the store cannot execute the query
        """
        pass

    @abstractmethod
    async def conditional_update(
        self, quote_id: QuoteId, mutation: QuoteMutation
    ) -> Optional[Quote]:
        """Atomically apply a mutation if its precondition holds.

        The precondition check and the write are one indivisible store
        operation; callers never read-modify-write.

        Args:
            quote_id: ID of the quote to update
            mutation: Voter set change or text replacement

        Returns:
            The updated quote, or None if no quote matched the id and the
            mutation's precondition
        """
        pass
