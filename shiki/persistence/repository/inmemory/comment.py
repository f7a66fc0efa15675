"""In-memory comment repository for testing."""

from typing import Optional

from shiki.domain.model.comment import Comment
from shiki.domain.repository.comment import CommentRepository
from shiki.domain.value import ArticleId, CommentId, CommentStatus


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_article(
        self,
        article_id: ArticleId,
        status: Optional[CommentStatus] = CommentStatus.APPROVED,
    ) -> list[Comment]:
        """Find comments on an article, newest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.article_id == article_id and (status is None or c.status == status)
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments

    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 50,
        offset: int = 0,
    ) -> list[Comment]:
        """Find comments in a status, oldest first."""
        comments = [c for c in self._comments.values() if c.status == status]
        comments.sort(key=lambda c: c.created_at)
        return comments[offset : offset + limit]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's moderation status."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"status": status})
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None
