"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from orgsocial.config import DocumentSettings, NetworkSettings, Settings
from orgsocial.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_document_settings(self, settings: Settings) -> DocumentSettings:
        return settings.document

    @provide(scope=Scope.APP)
    def provide_network_settings(self, settings: Settings) -> NetworkSettings:
        return settings.network
