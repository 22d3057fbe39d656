"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.comment import (
    CommentItemAssembler,
    CountArticleCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetRepliesUseCase,
    GetThreadUseCase,
    LikeCommentUseCase,
    ListArticleCommentsUseCase,
    ListUserCommentsUseCase,
    ModerateCommentUseCase,
    UnlikeCommentUseCase,
    UpdateCommentUseCase,
)
from quill.config import CommentSettings, PaginationSettings
from quill.domain.service import (
    ArticleService,
    CommentLikeService,
    CommentService,
    DecorationService,
    UserService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_comment_item_assembler(
        self, user_service: UserService, decoration_service: DecorationService
    ) -> CommentItemAssembler:
        """Provide comment item assembler."""
        return CommentItemAssembler(
            user_service=user_service, decoration_service=decoration_service
        )

    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            assembler=assembler,
        )

    @provide
    def get_replies_use_case(
        self,
        comment_service: CommentService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> GetRepliesUseCase:
        """Provide get replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service,
            assembler=assembler,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_thread_use_case(
        self,
        comment_service: CommentService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(
            comment_service=comment_service,
            assembler=assembler,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_list_article_comments_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
        comment_settings: CommentSettings,
    ) -> ListArticleCommentsUseCase:
        """Provide list article comments use case."""
        return ListArticleCommentsUseCase(
            comment_service=comment_service,
            article_service=article_service,
            assembler=assembler,
            pagination_settings=pagination_settings,
            comment_settings=comment_settings,
        )

    @provide
    def get_list_user_comments_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        assembler: CommentItemAssembler,
        pagination_settings: PaginationSettings,
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(
            comment_service=comment_service,
            user_service=user_service,
            assembler=assembler,
            pagination_settings=pagination_settings,
        )

    @provide
    def get_count_article_comments_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> CountArticleCommentsUseCase:
        """Provide count article comments use case."""
        return CountArticleCommentsUseCase(
            comment_service=comment_service, article_service=article_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, assembler: CommentItemAssembler
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service, assembler=assembler)

    @provide
    def get_moderate_comment_use_case(
        self,
        comment_service: CommentService,
        article_service: ArticleService,
        assembler: CommentItemAssembler,
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service,
            article_service=article_service,
            assembler=assembler,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, article_service: ArticleService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, article_service=article_service
        )

    @provide
    def get_like_comment_use_case(
        self, comment_like_service: CommentLikeService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_like_service=comment_like_service)

    @provide
    def get_unlike_comment_use_case(
        self, comment_like_service: CommentLikeService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(comment_like_service=comment_like_service)
