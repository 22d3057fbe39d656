"""Comment domain service.

Comments form a forest: each one points at its direct parent and at the
top-level comment of its thread (root_id). root_id is written once, when
the comment is created, so reading a whole thread is a single filter on
the stored value and never a walk up or down the tree.

Thread reads are cached under a per-thread version token. Every write that
touches a thread replaces the token, once when the write happens and once
more after the transaction commits, which moves later reads onto fresh
keys; stale pages simply expire. Tokens are random, so a version that
expires or is evicted never brings an old page back.
"""

from datetime import datetime
from functools import partial
import secrets
from typing import Awaitable, Callable, Dict, List, Sequence, Set

import logfire

from quill.config import CacheSettings, CommentSettings
from quill.domain.cache import Cache
from quill.domain.error import InvalidArgumentError, NotFoundError
from quill.domain.model.comment import Comment
from quill.domain.repository import CommentRepository
from quill.domain.transaction import CommitHooks
from quill.domain.value import ArticleId, CommentId, CommentStatus, ListResult, UserId
from quill.util.listing import build_paginated_list, page_offset

from .base import Service

CommentPage = ListResult[Comment]


class CommentService(Service):
    """Domain service for comment tree operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        cache: Cache,
        cache_settings: CacheSettings,
        comment_settings: CommentSettings,
        commit_hooks: CommitHooks,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            cache: Cache for thread pages
            cache_settings: Key prefix and TTLs for cached pages
            comment_settings: Deletion policy
            commit_hooks: Callbacks of the request transaction
        """
        self.comment_repository = comment_repository
        self.cache = cache
        self.cache_settings = cache_settings
        self.comment_settings = comment_settings
        self.commit_hooks = commit_hooks
        self._stale_roots: Set[CommentId] = set()

    async def create_comment(
        self,
        article_id: ArticleId,
        author_id: UserId,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        A top-level comment is its own root. A reply inherits the root of its
        parent. The parent is read with a shared lock, so it cannot be
        removed before the reply is inserted in the same transaction.

        Args:
            article_id: Article the comment belongs to
            author_id: Author user ID
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment does not exist
            InvalidArgumentError: If the parent belongs to another article
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=article_id,
            author_id=author_id,
            parent_id=parent_id,
        ):
            parent = None
            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id, lock=True)
                if parent is None:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=parent_id,
                        article_id=article_id,
                    )
                    raise NotFoundError("Comment", parent_id)
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment does not belong to article",
                        parent_id=parent_id,
                        parent_article_id=parent.article_id,
                        target_article_id=article_id,
                    )
                    raise InvalidArgumentError(
                        "Parent comment does not belong to this article"
                    )

            comment_id = await self.comment_repository.next_id()
            root_id = parent.root_id if parent is not None else comment_id

            now = datetime.now()
            comment = Comment(
                id=comment_id,
                article_id=article_id,
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                root_id=root_id,
                status=CommentStatus.PUBLISHED,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            if parent_id is not None:
                await self.comment_repository.increment_reply_count(parent_id)
            await self._bump_thread(root_id)

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                article_id=article_id,
                root_id=root_id,
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span("comment_service.get_comment_by_id", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment that must exist.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", comment_id)
        return comment

    async def get_direct_replies(
        self, comment_id: CommentId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of the direct replies of a comment.

        Args:
            comment_id: Parent comment ID
            page: Page number (1-based)
            limit: Replies per page

        Returns:
            Published replies in thread order (oldest first)

        Raises:
            NotFoundError: If the comment does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        with logfire.span(
            "comment_service.get_direct_replies",
            comment_id=comment_id,
            page=page,
            limit=limit,
        ):
            offset = page_offset(page, limit)
            comment = await self.get_comment(comment_id)

            async def load() -> CommentPage:
                replies = await self.comment_repository.find_children(
                    comment_id, limit=limit, offset=offset
                )
                total = await self.comment_repository.count_children(comment_id)
                return build_paginated_list(replies, total, page, limit)

            return await self._thread_page(
                comment.root_id, f"replies:{comment_id}:{page}:{limit}", load
            )

    async def get_all_descendants(
        self, comment_id: CommentId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of every comment in the thread rooted at ``comment_id``.

        Matches on the stored root_id only, so the result holds replies of
        every depth and excludes the root itself. For a comment that is not
        a root the result is empty.

        Args:
            comment_id: Root comment ID
            page: Page number (1-based)
            limit: Comments per page

        Returns:
            Published descendants in thread order (oldest first)

        Raises:
            NotFoundError: If the comment does not exist
            InvalidArgumentError: If page or limit is not positive
        """
        with logfire.span(
            "comment_service.get_all_descendants",
            comment_id=comment_id,
            page=page,
            limit=limit,
        ):
            offset = page_offset(page, limit)
            await self.get_comment(comment_id)

            async def load() -> CommentPage:
                descendants = await self.comment_repository.find_by_root(
                    comment_id, limit=limit, offset=offset
                )
                total = await self.comment_repository.count_by_root(comment_id)
                return build_paginated_list(descendants, total, page, limit)

            return await self._thread_page(
                comment_id, f"descendants:{page}:{limit}", load
            )

    async def get_reply_previews(
        self, parent_ids: Sequence[CommentId], size: int
    ) -> Dict[CommentId, List[Comment]]:
        """Get the first ``size`` published replies of several comments.

        Args:
            parent_ids: Parent comment IDs
            size: Replies per parent

        Returns:
            Mapping of parent ID to its first replies (oldest first)
        """
        if not parent_ids or size <= 0:
            return {parent_id: [] for parent_id in parent_ids}

        with logfire.span(
            "comment_service.get_reply_previews",
            parent_count=len(parent_ids),
            size=size,
        ):
            return await self.comment_repository.find_children_of_many(
                parent_ids, limit_per_parent=size
            )

    async def list_top_level(
        self, article_id: ArticleId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of an article's top-level comments, newest first.

        Raises:
            InvalidArgumentError: If page or limit is not positive
        """
        with logfire.span(
            "comment_service.list_top_level",
            article_id=article_id,
            page=page,
            limit=limit,
        ):
            offset = page_offset(page, limit)
            comments = await self.comment_repository.find_top_level_by_article(
                article_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_top_level_by_article(
                article_id
            )
            logfire.info(
                "Top-level comments retrieved",
                article_id=article_id,
                count=len(comments),
                total=total,
            )
            return build_paginated_list(comments, total, page, limit)

    async def list_by_author(
        self, author_id: UserId, page: int, limit: int
    ) -> CommentPage:
        """Get one page of a user's comments, newest first.

        Raises:
            InvalidArgumentError: If page or limit is not positive
        """
        with logfire.span(
            "comment_service.list_by_author",
            author_id=author_id,
            page=page,
            limit=limit,
        ):
            offset = page_offset(page, limit)
            comments = await self.comment_repository.find_by_author(
                author_id, limit=limit, offset=offset
            )
            total = await self.comment_repository.count_by_author(author_id)
            return build_paginated_list(comments, total, page, limit)

    async def count_by_article(self, article_id: ArticleId) -> int:
        """Count the published comments of an article, replies included."""
        with logfire.span("comment_service.count_by_article", article_id=article_id):
            return await self.comment_repository.count_by_article(article_id)

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Comment | None:
        """Replace the content of a comment.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment, None if the comment doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=comment_id,
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(comment_id, content)

            if updated is not None:
                await self._bump_thread(updated.root_id)
                logfire.info(
                    "Comment content updated",
                    comment_id=comment_id,
                    root_id=updated.root_id,
                )
            else:
                logfire.warn(
                    "Comment not found or deleted for content update",
                    comment_id=comment_id,
                )

            return updated

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Change the status of a comment.

        The parent's reply_count follows the comment in and out of the
        DELETED state.

        Args:
            comment_id: Comment ID
            status: New status

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_status",
            comment_id=comment_id,
            status=status.value,
        ):
            current = await self.get_comment(comment_id)

            updated = await self.comment_repository.update_status(comment_id, status)
            if updated is None:
                raise NotFoundError("Comment", comment_id)

            if current.parent_id is not None:
                if not current.is_deleted and updated.is_deleted:
                    await self.comment_repository.decrement_reply_count(
                        current.parent_id
                    )
                elif current.is_deleted and not updated.is_deleted:
                    await self.comment_repository.increment_reply_count(
                        current.parent_id
                    )

            await self._bump_thread(updated.root_id)
            logfire.info(
                "Comment status changed",
                comment_id=comment_id,
                previous_status=current.status.value,
                status=status.value,
            )
            return updated

    async def delete_comment(self, comment_id: CommentId) -> List[Comment]:
        """Delete a comment following the configured deletion policy.

        soft: the status becomes DELETED; replies keep their root_id and
        stay reachable through the thread.
        hard: the row is removed together with every reply below it.

        Args:
            comment_id: Comment ID

        Returns:
            The comments that were published before the deletion and no
            longer are, as they were before it

        Raises:
            NotFoundError: If the comment does not exist
        """
        policy = self.comment_settings.deletion_policy
        with logfire.span(
            "comment_service.delete_comment", comment_id=comment_id, policy=policy
        ):
            comment = await self.get_comment(comment_id)

            if policy == "soft":
                if comment.is_deleted:
                    return []
                await self.update_status(comment_id, CommentStatus.DELETED)
                return [comment] if comment.is_published else []

            if comment.parent_id is not None and not comment.is_deleted:
                await self.comment_repository.decrement_reply_count(comment.parent_id)
            removed = await self.comment_repository.delete(comment_id)
            await self._bump_thread(comment.root_id)

            logfire.info(
                "Comment removed",
                comment_id=comment_id,
                root_id=comment.root_id,
                removed=len(removed),
            )
            return [c for c in removed if c.is_published]

    async def increment_likes(self, comment: Comment) -> None:
        """Atomically increment comment likes."""
        await self.comment_repository.increment_likes(comment.id)
        await self._bump_thread(comment.root_id)

    async def decrement_likes(self, comment: Comment) -> None:
        """Atomically decrement comment likes (minimum 0)."""
        await self.comment_repository.decrement_likes(comment.id)
        await self._bump_thread(comment.root_id)

    def _version_key(self, root_id: CommentId) -> str:
        return f"{self.cache_settings.key_prefix}:thread:{root_id}:version"

    async def _new_thread_version(self, root_id: CommentId) -> str:
        version = secrets.token_hex(8)
        await self.cache.set(
            self._version_key(root_id),
            version,
            ttl_seconds=self.cache_settings.version_ttl_seconds,
        )
        logfire.debug("Thread version replaced", root_id=root_id, version=version)
        return version

    async def _bump_thread(self, root_id: CommentId) -> None:
        await self._new_thread_version(root_id)
        # Until the commit, other readers still load the old rows and may
        # cache them under the version just written
        if root_id not in self._stale_roots:
            self._stale_roots.add(root_id)
            self.commit_hooks.add(partial(self._bump_after_commit, root_id))

    async def _bump_after_commit(self, root_id: CommentId) -> None:
        self._stale_roots.discard(root_id)
        await self._new_thread_version(root_id)

    async def _thread_page(
        self,
        root_id: CommentId,
        suffix: str,
        load: Callable[[], Awaitable[CommentPage]],
    ) -> CommentPage:
        version = await self.cache.get(self._version_key(root_id))
        if version is None:
            version = await self._new_thread_version(root_id)
        key = f"{self.cache_settings.key_prefix}:thread:{root_id}:v{version}:{suffix}"

        cached = await self.cache.get(key)
        if cached is not None:
            logfire.debug("Thread page served from cache", key=key)
            return CommentPage.model_validate_json(cached)

        result = await load()
        await self.cache.set(
            key, result.model_dump_json(), ttl_seconds=self.cache_settings.ttl_seconds
        )
        return result
