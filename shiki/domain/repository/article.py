"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel

from shiki.domain.model.article import Article
from shiki.domain.value import ArticleId, ArticleQuery, ArticleStatus


class ArticleTotals(BaseModel):
    """Aggregate counters over a set of articles."""

    count: int = 0
    views: int = 0
    likes: int = 0


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID, regardless of status.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(self, query: ArticleQuery) -> tuple[List[Article], int]:
        """Run a planned listing query.

        Args:
            query: Predicates, ordering and offset/limit window

        Returns:
            Tuple of (articles in the window, exact count of all matches)
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Article]:
        """Find every article, newest created first (admin listing)."""
        pass

    @abstractmethod
    async def totals(self, status: Optional[ArticleStatus] = None) -> ArticleTotals:
        """Count articles and sum their view/like counters.

        Args:
            status: Restrict to this status (None for all articles)
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article.

        Returns:
            True if an article was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def increment_view_count(self, article_id: ArticleId) -> None:
        """Atomically increment view_count by 1.

        Args:
            article_id: The article ID
        """
        pass

    @abstractmethod
    async def adjust_like_count(self, article_id: ArticleId, delta: int) -> int:
        """Atomically add ``delta`` to like_count, clamping at zero.

        Args:
            article_id: The article ID
            delta: +1 for a like, -1 for an unlike

        Returns:
            The resulting like_count (0 if the article does not exist)
        """
        pass
