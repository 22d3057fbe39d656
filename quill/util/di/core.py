"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import (
    AuthSettings,
    CacheSettings,
    CommentSettings,
    PaginationSettings,
    Settings,
)
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    Each settings section is provided on its own so consumers depend only on
    what they read.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide
    def provide_cache_settings(self, settings: Settings) -> CacheSettings:
        """Provide cache settings."""
        return settings.cache

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        """Provide pagination settings."""
        return settings.pagination

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment settings."""
        return settings.comments
