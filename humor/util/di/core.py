"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from humor.config import AuthSettings, ContentSettings, NotificationSettings, Settings
from humor.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from environment variables and .env."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content

    @provide(scope=Scope.APP)
    def provide_notification_settings(
        self, settings: Settings
    ) -> NotificationSettings:
        return settings.notifications
