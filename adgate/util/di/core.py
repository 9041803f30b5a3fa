"""Core DI providers."""

from dishka import Scope, provide

from adgate.config import AuthSettings, LinkSettings, Settings, UpstreamSettings
from adgate.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config component base; implementations provide ``Settings``."""

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()


class SettingsSectionProvider(ProviderBase):
    """Nested settings sections, taken from whichever ``Settings`` is provided."""

    scope = Scope.APP

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_link_settings(self, settings: Settings) -> LinkSettings:
        """Provide account link settings."""
        return settings.links

    @provide
    def provide_upstream_settings(self, settings: Settings) -> UpstreamSettings:
        """Provide upstream payment API settings."""
        return settings.upstream
