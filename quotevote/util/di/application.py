"""Application layer DI providers."""

from dishka import Scope, provide

from quotevote.application.usecase.auth import LoginUseCase, RegisterUseCase
from quotevote.application.usecase.quote import (
    AddQuoteUseCase,
    CastVoteUseCase,
    GetQuoteUseCase,
    ListQuotesUseCase,
    UpdateQuoteUseCase,
)
from quotevote.domain.service import AuthService, ListingQueryBuilder, QuoteService
from quotevote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(self, auth_service: AuthService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_login_use_case(self, auth_service: AuthService) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service)

    # Quote use cases
    @provide(scope=Scope.REQUEST)
    def get_add_quote_use_case(self, quote_service: QuoteService) -> AddQuoteUseCase:
        """Provide add quote use case."""
        return AddQuoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_list_quotes_use_case(
        self, quote_service: QuoteService, query_builder: ListingQueryBuilder
    ) -> ListQuotesUseCase:
        """Provide list quotes use case."""
        return ListQuotesUseCase(
            quote_service=quote_service, query_builder=query_builder
        )

    @provide(scope=Scope.REQUEST)
    def get_get_quote_use_case(self, quote_service: QuoteService) -> GetQuoteUseCase:
        """Provide get quote use case."""
        return GetQuoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, quote_service: QuoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(quote_service=quote_service)

    @provide(scope=Scope.REQUEST)
    def get_update_quote_use_case(
        self, quote_service: QuoteService
    ) -> UpdateQuoteUseCase:
        """Provide update quote use case."""
        return UpdateQuoteUseCase(quote_service=quote_service)
