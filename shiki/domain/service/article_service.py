"""Article domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from shiki.domain.error import NotFoundError, StoreError, ValidationError
from shiki.domain.model.article import Article
from shiki.domain.model.common import utc_now
from shiki.domain.repository import ArticleRepository, ArticleTotals
from shiki.domain.value import (
    AllOf,
    ArticleFilters,
    ArticleId,
    ArticleQuery,
    ArticleStatus,
    FieldEquals,
    FieldRange,
    SortKey,
)

from .article_query import (
    ArticlePage,
    interpret_article_result,
    plan_article_query,
)
from .base import Service


class ArticleService(Service):
    """Domain service for article operations."""

    def __init__(self, article_repository: ArticleRepository) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
        """
        self.article_repository = article_repository

    async def list_published(
        self, filters: ArticleFilters, page: int, page_size: int
    ) -> ArticlePage:
        """Run the public listing for a filter state.

        Args:
            filters: Reader's filter state
            page: 1-based page number
            page_size: Articles per page

        Returns:
            Page of published articles with the total page count
        """
        query = plan_article_query(filters, page, page_size)
        with logfire.span(
            "article_service.list_published",
            offset=query.offset,
            limit=query.limit,
            sort=query.order_by.field,
        ):
            items, total = await self.article_repository.find_page(query)
            result = interpret_article_result(items, total, page, page_size)
            logfire.info(
                "Articles listed",
                count=len(result.items),
                total=result.total_count,
                total_pages=result.total_pages,
            )
            return result

    async def get_published_article(self, article_id: ArticleId) -> Article:
        """Get a published article for the detail page.

        Raises:
            NotFoundError: If the article does not exist or is a draft
        """
        with logfire.span(
            "article_service.get_published_article", article_id=str(article_id)
        ):
            article = await self.article_repository.find_by_id(article_id)
            if article is None or not article.is_published:
                logfire.warn("Published article not found", article_id=str(article_id))
                raise NotFoundError("Article", str(article_id))
            return article

    async def get_article(self, article_id: ArticleId) -> Article:
        """Get an article in any status (admin).

        Raises:
            NotFoundError: If the article does not exist
        """
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            raise NotFoundError("Article", str(article_id))
        return article

    async def record_view(self, article_id: ArticleId) -> bool:
        """Count one detail-page visit.

        View counts are not critical: a store failure is logged and swallowed
        so it never blocks the article read.

        Returns:
            True if the increment was stored
        """
        with logfire.span("article_service.record_view", article_id=str(article_id)):
            try:
                await self.article_repository.increment_view_count(article_id)
            except StoreError as e:
                logfire.warn(
                    "View count increment failed",
                    article_id=str(article_id),
                    error=str(e),
                )
                return False
            return True

    async def latest_published(self, limit: int) -> list[Article]:
        """Most recently published articles (home page)."""
        with logfire.span("article_service.latest_published", limit=limit):
            query = plan_article_query(ArticleFilters(), page=1, page_size=limit)
            items, _ = await self.article_repository.find_page(query)
            return items

    async def count_published_between(self, start: datetime, end: datetime) -> int:
        """Count published articles with published_at in [start, end]."""
        query = ArticleQuery(
            where=AllOf(
                predicates=(
                    FieldEquals(field="status", value=ArticleStatus.PUBLISHED.value),
                    FieldRange(field="published_at", gte=start, lte=end),
                )
            ),
            order_by=SortKey(field="published_at"),
            offset=0,
            limit=1,
        )
        _, total = await self.article_repository.find_page(query)
        return total

    async def list_all(self) -> list[Article]:
        """Every article regardless of status, newest created first (admin)."""
        with logfire.span("article_service.list_all"):
            articles = await self.article_repository.find_all()
            logfire.info("All articles listed", count=len(articles))
            return articles

    async def totals(self, status: ArticleStatus | None = None) -> ArticleTotals:
        """Article count and summed counters, optionally for one status."""
        return await self.article_repository.totals(status)

    async def create_article(
        self,
        title: str,
        content: str,
        excerpt: str,
        category_tags: list[str],
        status: ArticleStatus,
    ) -> Article:
        """Create an article (admin).

        Blank category tags are dropped. An article created as published is
        stamped with published_at immediately.

        Raises:
            ValidationError: If the title is blank
        """
        with logfire.span(
            "article_service.create_article", title=title, status=status.value
        ):
            if not title.strip():
                raise ValidationError("title", "Title is required")

            now = utc_now()
            tags = [tag.strip() for tag in category_tags if tag.strip()]
            try:
                article = Article(
                    id=ArticleId(uuid4()),
                    title=title.strip(),
                    content=content,
                    excerpt=excerpt,
                    status=ArticleStatus.DRAFT,
                    category_tags=tags,
                    created_at=now,
                    updated_at=now,
                ).with_status(status, now)
            except PydanticValidationError as e:
                error = e.errors()[0]
                field = str(error["loc"][0]) if error["loc"] else "article"
                raise ValidationError(field, error["msg"]) from e

            saved = await self.article_repository.save(article)
            logfire.info(
                "Article created",
                article_id=str(saved.id),
                status=saved.status.value,
                tags=tags,
            )
            return saved

    async def set_status(
        self, article_id: ArticleId, status: ArticleStatus
    ) -> Article:
        """Publish or unpublish an article.

        published_at is kept when going back to draft.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "article_service.set_status",
            article_id=str(article_id),
            status=status.value,
        ):
            article = await self.get_article(article_id)
            if article.status == status:
                logfire.info("Article status unchanged", article_id=str(article_id))
                return article

            updated = article.with_status(status, utc_now())
            saved = await self.article_repository.save(updated)
            logfire.info(
                "Article status changed",
                article_id=str(article_id),
                status=status.value,
                published_at=str(saved.published_at),
            )
            return saved

    async def toggle_status(self, article_id: ArticleId) -> Article:
        """Flip between draft and published."""
        article = await self.get_article(article_id)
        target = (
            ArticleStatus.DRAFT if article.is_published else ArticleStatus.PUBLISHED
        )
        return await self.set_status(article_id, target)

    async def delete_article(self, article_id: ArticleId) -> None:
        """Delete an article.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "article_service.delete_article", article_id=str(article_id)
        ):
            deleted = await self.article_repository.delete(article_id)
            if not deleted:
                logfire.warn("Article to delete not found", article_id=str(article_id))
                raise NotFoundError("Article", str(article_id))
            logfire.info("Article deleted", article_id=str(article_id))
