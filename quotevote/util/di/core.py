"""Settings providers.

``Settings`` is read from the environment once per container; the nested
groups are exposed separately so services depend only on what they use.
"""

from dishka import Scope, provide

from quotevote.config import AuthSettings, DatabaseSettings, ListingSettings, Settings
from quotevote.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def database(self, settings: Settings) -> DatabaseSettings:
        return settings.database

    @provide
    def listing(self, settings: Settings) -> ListingSettings:
        return settings.listing
