"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings, CacheSettings, CommentSettings
from quill.domain.cache import Cache
from quill.domain.repository import (
    ArticleRepository,
    CommentLikeRepository,
    CommentRepository,
    DecorationRepository,
    UserRepository,
)
from quill.domain.service import (
    ArticleService,
    CommentLikeService,
    CommentService,
    DecorationService,
    JWTService,
    UserService,
)
from quill.domain.transaction import CommitHooks
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        cache: Cache,
        cache_settings: CacheSettings,
        comment_settings: CommentSettings,
        commit_hooks: CommitHooks,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            cache=cache,
            cache_settings=cache_settings,
            comment_settings=comment_settings,
            commit_hooks=commit_hooks,
        )

    @provide
    def get_comment_like_service(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            comment_like_repository=comment_like_repository,
            comment_service=comment_service,
        )

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(article_repository=article_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_decoration_service(
        self, decoration_repository: DecorationRepository
    ) -> DecorationService:
        """Provide decoration domain service."""
        return DecorationService(decoration_repository=decoration_repository)
