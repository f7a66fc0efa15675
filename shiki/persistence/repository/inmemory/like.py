"""In-memory like repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from shiki.domain.model.like import Like
from shiki.domain.repository.like import LikeRepository
from shiki.domain.value import ArticleId, VisitorId


class InMemoryLikeRepository(LikeRepository):
    """In-memory implementation of LikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[Like] = []

    async def find_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> Optional[Like]:
        """Find a visitor's like on an article."""
        for like in self._likes:
            if like.article_id == article_id and like.visitor_id == visitor_id:
                return like
        return None

    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the visitor already liked the article
        """
        existing = await self.find_by_article_and_visitor(
            like.article_id, like.visitor_id
        )
        if existing:
            raise IntegrityError("Duplicate like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> bool:
        """Delete a visitor's like."""
        for i, like in enumerate(self._likes):
            if like.article_id == article_id and like.visitor_id == visitor_id:
                self._likes.pop(i)
                return True
        return False
