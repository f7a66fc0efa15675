"""PostgreSQL implementation of Like repository."""

from typing import Optional

from sqlalchemy import and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from shiki.domain.model import Like
from shiki.domain.repository import LikeRepository
from shiki.domain.value import ArticleId, VisitorId
from shiki.persistence.error import store_errors
from shiki.persistence.mappers import like_to_dict, row_to_like
from shiki.persistence.tables import likes_table


class PostgresLikeRepository(LikeRepository):
    """PostgreSQL implementation of LikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> Optional[Like]:
        """Find a visitor's like on an article."""
        with store_errors("like.find_by_article_and_visitor"):
            stmt = select(likes_table).where(
                and_(
                    likes_table.c.article_id == article_id,
                    likes_table.c.visitor_id == visitor_id.root,
                )
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_like(row._asdict()) if row else None

    async def save(self, like: Like) -> Like:
        """Save a like (create).

        Runs in a savepoint so a duplicate leaves the request's transaction
        usable.
        """
        with store_errors("like.save", propagate_integrity=True):
            async with self.session.begin_nested():
                stmt = insert(likes_table).values(**like_to_dict(like))
                await self.session.execute(stmt)
            return like

    async def delete_by_article_and_visitor(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> bool:
        """Delete a visitor's like."""
        with store_errors("like.delete_by_article_and_visitor"):
            stmt = delete(likes_table).where(
                and_(
                    likes_table.c.article_id == article_id,
                    likes_table.c.visitor_id == visitor_id.root,
                )
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
