"""Like repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from shiki.domain.model.like import Like
from shiki.domain.value import ArticleId, VisitorId


class LikeRepository(ABC):
    """Repository for Like entity.

    The store enforces one like per (article, visitor) pair.
    """

    @abstractmethod
    async def find_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> Optional[Like]:
        """Find a visitor's like on an article."""
        pass

    @abstractmethod
    async def save(self, like: Like) -> Like:
        """Save a like.

        Raises:
            IntegrityError: If the visitor already liked the article
        """
        pass

    @abstractmethod
    async def delete_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> bool:
        """Delete a visitor's like.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
