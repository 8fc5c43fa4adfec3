"""Configuration providers."""

from dishka import Scope, provide

from oer.config import Settings, StoreSettings
from oer.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once from the environment (and .env) per container."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return Settings()

    @provide(scope=Scope.APP)
    def provide_store_settings(self, settings: Settings) -> StoreSettings:
        """Store policies, injected into the domain services."""
        return settings.store
