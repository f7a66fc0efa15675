"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import asc, desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shiki.domain.model import Comment
from shiki.domain.repository import CommentRepository
from shiki.domain.value import ArticleId, CommentId, CommentStatus
from shiki.persistence.error import store_errors
from shiki.persistence.mappers import comment_to_dict, row_to_comment
from shiki.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with store_errors("comment.find_by_id"):
            stmt = select(comments_table).where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_comment(row._asdict()) if row else None

    async def find_by_article(
        self,
        article_id: ArticleId,
        status: Optional[CommentStatus] = CommentStatus.APPROVED,
    ) -> List[Comment]:
        """Find comments on an article, newest first."""
        with store_errors("comment.find_by_article"):
            stmt = select(comments_table).where(
                comments_table.c.article_id == article_id
            )
            if status is not None:
                stmt = stmt.where(comments_table.c.status == status.value)
            stmt = stmt.order_by(desc(comments_table.c.created_at))

            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_status(
        self,
        status: CommentStatus,
        limit: int = 50,
        offset: int = 0,
    ) -> List[Comment]:
        """Find comments in a status across all articles, oldest first."""
        with store_errors("comment.find_by_status"):
            stmt = (
                select(comments_table)
                .where(comments_table.c.status == status.value)
                .order_by(asc(comments_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        with store_errors("comment.save"):
            existing = await self.find_by_id(comment.id)
            comment_dict = comment_to_dict(comment)

            if existing:
                stmt = (
                    comments_table.update()
                    .where(comments_table.c.id == comment.id)
                    .values(**comment_dict)
                )
            else:
                stmt = comments_table.insert().values(**comment_dict)
            await self.session.execute(stmt)
            await self.session.flush()
            return comment

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set a comment's moderation status."""
        with store_errors("comment.update_status"):
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment_id)
                .values(status=status.value)
                .returning(comments_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                return None

            await self.session.flush()
            return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        with store_errors("comment.delete"):
            stmt = comments_table.delete().where(comments_table.c.id == comment_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0  # type: ignore[attr-defined]
