"""In-memory article repository for testing."""

from typing import Optional

from shiki.domain.model.article import Article
from shiki.domain.repository.article import ArticleRepository, ArticleTotals
from shiki.domain.value import ArticleId, ArticleQuery, ArticleStatus

from .query import matches, sort_records


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing."""

    def __init__(self) -> None:
        self._articles: dict[ArticleId, Article] = {}

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        return self._articles.get(article_id)

    async def find_page(self, query: ArticleQuery) -> tuple[list[Article], int]:
        """Filter, sort and slice the stored articles."""
        found = [a for a in self._articles.values() if matches(query.where, a)]
        ordered = sort_records(found, query.order_by)
        return ordered[query.offset : query.offset + query.limit], len(found)

    async def find_all(self) -> list[Article]:
        """Find every article, newest created first."""
        return sorted(
            self._articles.values(), key=lambda a: a.created_at, reverse=True
        )

    async def totals(self, status: Optional[ArticleStatus] = None) -> ArticleTotals:
        """Count articles and sum their counters."""
        articles = [
            a for a in self._articles.values() if status is None or a.status == status
        ]
        return ArticleTotals(
            count=len(articles),
            views=sum(a.view_count for a in articles),
            likes=sum(a.like_count for a in articles),
        )

    async def save(self, article: Article) -> Article:
        """Save an article, keeping stored counters on update."""
        existing = self._articles.get(article.id)
        if existing is not None:
            article = article.model_copy(
                update={
                    "view_count": existing.view_count,
                    "like_count": existing.like_count,
                }
            )
        self._articles[article.id] = article
        return article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article."""
        return self._articles.pop(article_id, None) is not None

    async def increment_view_count(self, article_id: ArticleId) -> None:
        """Increment view_count by 1."""
        article = self._articles.get(article_id)
        if article:
            self._articles[article_id] = article.model_copy(
                update={"view_count": article.view_count + 1}
            )

    async def adjust_like_count(self, article_id: ArticleId, delta: int) -> int:
        """Add ``delta`` to like_count (minimum 0)."""
        article = self._articles.get(article_id)
        if article is None:
            return 0
        like_count = max(article.like_count + delta, 0)
        self._articles[article_id] = article.model_copy(
            update={"like_count": like_count}
        )
        return like_count
