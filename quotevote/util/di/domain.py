"""Domain layer DI providers."""

from dishka import Scope, provide

from quotevote.config import AuthSettings, ListingSettings
from quotevote.domain.repository import QuoteRepository, UserRepository
from quotevote.domain.service import (
    AuthService,
    EditGuard,
    JWTService,
    ListingQueryBuilder,
    QuoteService,
    VoteService,
)
from quotevote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        user_repository: UserRepository,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository,
            jwt_service=jwt_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_query_builder(
        self, listing_settings: ListingSettings
    ) -> ListingQueryBuilder:
        """Provide listing query builder."""
        return ListingQueryBuilder(listing_settings=listing_settings)

    @provide
    def get_vote_service(self, quote_repository: QuoteRepository) -> VoteService:
        """Provide vote state machine."""
        return VoteService(quote_repository=quote_repository)

    @provide
    def get_edit_guard(self, quote_repository: QuoteRepository) -> EditGuard:
        """Provide edit guard."""
        return EditGuard(quote_repository=quote_repository)

    @provide
    def get_quote_service(
        self,
        quote_repository: QuoteRepository,
        vote_service: VoteService,
        edit_guard: EditGuard,
    ) -> QuoteService:
        """Provide quote domain service."""
        return QuoteService(
            quote_repository=quote_repository,
            vote_service=vote_service,
            edit_guard=edit_guard,
        )
