"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from shiki.config import ListingSettings, Settings, VisitorSettings
from shiki.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_listing_settings(self, settings: Settings) -> ListingSettings:
        """Provide article listing settings."""
        return settings.listing

    @provide(scope=Scope.APP)
    def provide_visitor_settings(self, settings: Settings) -> VisitorSettings:
        """Provide visitor identity settings."""
        return settings.visitor
