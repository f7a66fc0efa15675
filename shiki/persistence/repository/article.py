"""PostgreSQL implementation of Article repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiki.domain.model import Article
from shiki.domain.repository import ArticleRepository, ArticleTotals
from shiki.domain.value import ArticleId, ArticleQuery, ArticleStatus
from shiki.persistence.error import store_errors
from shiki.persistence.mappers import article_to_dict, row_to_article
from shiki.persistence.query import compile_order, compile_predicate
from shiki.persistence.tables import articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        with store_errors("article.find_by_id"):
            stmt = select(articles_table).where(articles_table.c.id == article_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_article(row._asdict()) if row else None

    async def find_page(self, query: ArticleQuery) -> tuple[List[Article], int]:
        """Run a planned listing query.

        The window and the exact total are read in one statement with a
        ``count(*) OVER ()`` column.
        """
        with logfire.span(
            "article_repository.find_page",
            offset=query.offset,
            limit=query.limit,
            order_by=query.order_by.field,
            descending=query.order_by.descending,
        ), store_errors("article.find_page"):
            where = compile_predicate(query.where, articles_table)
            stmt = (
                select(articles_table, func.count().over().label("total_count"))
                .where(where)
                .order_by(compile_order(query.order_by, articles_table))
                .limit(query.limit)
                .offset(query.offset)
            )
            result = await self.session.execute(stmt)
            rows = [row._asdict() for row in result.fetchall()]

            if rows:
                total = rows[0]["total_count"]
            elif query.offset > 0:
                # Past the last page the window is empty; count separately.
                count_stmt = (
                    select(func.count()).select_from(articles_table).where(where)
                )
                total = (await self.session.execute(count_stmt)).scalar() or 0
            else:
                total = 0

            articles = [row_to_article(row) for row in rows]
            logfire.info("Found articles", count=len(articles), total=total)
            return articles, total

    async def find_all(self) -> List[Article]:
        """Find every article, newest created first."""
        with store_errors("article.find_all"):
            stmt = select(articles_table).order_by(desc(articles_table.c.created_at))
            result = await self.session.execute(stmt)
            return [row_to_article(row._asdict()) for row in result.fetchall()]

    async def totals(self, status: Optional[ArticleStatus] = None) -> ArticleTotals:
        """Count articles and sum their counters."""
        with store_errors("article.totals"):
            stmt = select(
                func.count(),
                func.coalesce(func.sum(articles_table.c.view_count), 0),
                func.coalesce(func.sum(articles_table.c.like_count), 0),
            ).select_from(articles_table)
            if status is not None:
                stmt = stmt.where(articles_table.c.status == status.value)
            result = await self.session.execute(stmt)
            count, views, likes = result.one()
            return ArticleTotals(count=count, views=views, likes=likes)

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        with logfire.span(
            "article_repository.save", article_id=str(article.id)
        ), store_errors("article.save"):
            existing = await self.find_by_id(article.id)
            article_dict = article_to_dict(article)

            if existing:
                # Counters are owned by the atomic increment statements
                article_dict.pop("view_count")
                article_dict.pop("like_count")
                stmt = (
                    articles_table.update()
                    .where(articles_table.c.id == article.id)
                    .values(**article_dict)
                )
            else:
                stmt = articles_table.insert().values(**article_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return await self.find_by_id(article.id) or article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article (hard delete, comments and likes cascade)."""
        with store_errors("article.delete"):
            stmt = articles_table.delete().where(articles_table.c.id == article_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]

    async def increment_view_count(self, article_id: ArticleId) -> None:
        """Atomically increment view_count by 1.

        Runs in a savepoint so a failure here leaves the request's
        transaction usable.
        """
        with store_errors("article.increment_view_count"):
            async with self.session.begin_nested():
                stmt = (
                    articles_table.update()
                    .where(articles_table.c.id == article_id)
                    .values(view_count=articles_table.c.view_count + 1)
                )
                await self.session.execute(stmt)

    async def adjust_like_count(self, article_id: ArticleId, delta: int) -> int:
        """Atomically add ``delta`` to like_count (minimum 0)."""
        with store_errors("article.adjust_like_count"):
            stmt = (
                articles_table.update()
                .where(articles_table.c.id == article_id)
                .values(
                    like_count=func.greatest(articles_table.c.like_count + delta, 0)
                )
                .returning(articles_table.c.like_count)
            )
            result = await self.session.execute(stmt)
            like_count = result.scalar()
            await self.session.flush()
            return like_count or 0
