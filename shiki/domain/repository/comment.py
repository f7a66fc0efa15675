"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from shiki.domain.model.comment import Comment
from shiki.domain.value import ArticleId, CommentId, CommentStatus


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_article(
        self,
        article_id: ArticleId,
        status: Optional[CommentStatus] = CommentStatus.APPROVED,
    ) -> List[Comment]:
        """Find comments on an article, newest first.

        The result is flat; threads are rebuilt by the comment tree builder.

        Args:
            article_id: The article ID
            status: Only return comments in this status (None for all)

        Returns:
            List of comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments across all articles in a given status, oldest first.

        Used for the moderation queue.
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's moderation status.

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete).

        Returns:
            True if a comment was deleted, False if none existed
        """
        pass
