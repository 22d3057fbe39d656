"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from quill.domain.model.comment import Comment
from quill.domain.value import ArticleId, CommentId, CommentStatus, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.

    Unless stated otherwise, list methods return comments in thread order:
    ``created_at`` ascending, ties broken by ``id`` ascending. With
    ``published_only`` set, only PUBLISHED comments are considered.
    """

    @abstractmethod
    async def next_id(self) -> CommentId:
        """Reserve the identifier for a comment about to be inserted.

        Returns:
            A fresh, never-used comment ID
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, lock: bool = False
    ) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier
            lock: Hold a shared row lock until the surrounding transaction
                ends, so the row cannot be removed in the meantime

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find direct replies of a comment.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip
            published_only: Whether to skip non-published comments

        Returns:
            One page of direct replies in thread order
        """
        pass

    @abstractmethod
    async def count_children(
        self, parent_id: CommentId, published_only: bool = True
    ) -> int:
        """Count direct replies of a comment."""
        pass

    @abstractmethod
    async def find_children_of_many(
        self,
        parent_ids: Sequence[CommentId],
        limit_per_parent: int,
        published_only: bool = True,
    ) -> Dict[CommentId, List[Comment]]:
        """Find the first direct replies of several comments at once.

        Args:
            parent_ids: Parent comment IDs
            limit_per_parent: Maximum replies returned per parent
            published_only: Whether to skip non-published comments

        Returns:
            Mapping of parent ID to its first replies in thread order.
            Parents without replies map to an empty list.
        """
        pass

    @abstractmethod
    async def find_by_root(
        self,
        root_id: CommentId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find every comment of a thread except the root itself.

        Uses the stored root_id, so depth does not matter.

        Args:
            root_id: The thread's top-level comment ID
            limit: Maximum number of comments to return
            offset: Number of comments to skip
            published_only: Whether to skip non-published comments

        Returns:
            One page of descendants in thread order
        """
        pass

    @abstractmethod
    async def count_by_root(self, root_id: CommentId, published_only: bool = True) -> int:
        """Count the descendants of a thread's root (root excluded)."""
        pass

    @abstractmethod
    async def find_top_level_by_article(
        self,
        article_id: ArticleId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find top-level comments of an article, newest first."""
        pass

    @abstractmethod
    async def count_top_level_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count top-level comments of an article."""
        pass

    @abstractmethod
    async def find_by_author(
        self,
        author_id: UserId,
        limit: int,
        offset: int = 0,
        published_only: bool = True,
    ) -> List[Comment]:
        """Find comments written by a user, newest first."""
        pass

    @abstractmethod
    async def count_by_author(
        self, author_id: UserId, published_only: bool = True
    ) -> int:
        """Count comments written by a user."""
        pass

    @abstractmethod
    async def count_by_article(
        self, article_id: ArticleId, published_only: bool = True
    ) -> int:
        """Count all comments of an article, replies included."""
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content.

        Returns:
            The updated comment, or None if it does not exist or is deleted
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change a comment's status.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def increment_reply_count(self, comment_id: CommentId) -> None:
        """Atomically increment reply_count by 1."""
        pass

    @abstractmethod
    async def decrement_reply_count(self, comment_id: CommentId) -> None:
        """Atomically decrement reply_count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def increment_likes(self, comment_id: CommentId) -> None:
        """Atomically increment likes by 1."""
        pass

    @abstractmethod
    async def decrement_likes(self, comment_id: CommentId) -> None:
        """Atomically decrement likes by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> List[Comment]:
        """Delete a comment and every reply below it (hard delete).

        Args:
            comment_id: The comment ID to delete

        Returns:
            The removed comments, in no particular order (empty if the
            comment did not exist)
        """
        pass
