"""Like domain service."""

from uuid import uuid4

import logfire
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from shiki.domain.error import NotFoundError
from shiki.domain.model.common import utc_now
from shiki.domain.model.like import Like
from shiki.domain.repository import ArticleRepository, LikeRepository
from shiki.domain.value import ArticleId, LikeId, VisitorId

from .base import Service


class LikeState(BaseModel):
    """Whether a visitor likes an article, and the article's like count."""

    liked: bool
    like_count: int


class LikeService(Service):
    """Domain service for article likes.

    Visitor identity is best effort. The "unknown" visitor never matches a
    stored like, so its likes are always accepted and only bump the counter.
    """

    def __init__(
        self,
        like_repository: LikeRepository,
        article_repository: ArticleRepository,
    ) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
            article_repository: Article repository (for like_count)
        """
        self.like_repository = like_repository
        self.article_repository = article_repository

    async def _get_article_like_count(self, article_id: ArticleId) -> int:
        article = await self.article_repository.find_by_id(article_id)
        if article is None:
            logfire.warn("Like on non-existent article", article_id=str(article_id))
            raise NotFoundError("Article", str(article_id))
        return article.like_count

    async def has_liked(self, article_id: ArticleId, visitor_id: VisitorId) -> bool:
        """Check whether a visitor already liked an article."""
        if visitor_id.is_unknown:
            return False
        like = await self.like_repository.find_by_article_and_visitor(
            article_id, visitor_id
        )
        return like is not None

    async def get_like_state(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> LikeState:
        """Current like state for a visitor.

        Raises:
            NotFoundError: If the article does not exist
        """
        like_count = await self._get_article_like_count(article_id)
        liked = await self.has_liked(article_id, visitor_id)
        return LikeState(liked=liked, like_count=like_count)

    async def like(self, article_id: ArticleId, visitor_id: VisitorId) -> LikeState:
        """Like an article.

        A repeated like from the same visitor is ignored.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "like_service.like",
            article_id=str(article_id),
            visitor_id=str(visitor_id),
        ):
            like_count = await self._get_article_like_count(article_id)

            if visitor_id.is_unknown:
                like_count = await self.article_repository.adjust_like_count(
                    article_id, 1
                )
                logfire.info(
                    "Like from unknown visitor counted", article_id=str(article_id)
                )
                return LikeState(liked=True, like_count=like_count)

            like = Like(
                id=LikeId(uuid4()),
                article_id=article_id,
                visitor_id=visitor_id,
                created_at=utc_now(),
            )
            try:
                await self.like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    article_id=str(article_id),
                    visitor_id=str(visitor_id),
                )
                return LikeState(liked=True, like_count=like_count)

            like_count = await self.article_repository.adjust_like_count(article_id, 1)
            logfire.info(
                "Article liked", article_id=str(article_id), like_count=like_count
            )
            return LikeState(liked=True, like_count=like_count)

    async def unlike(self, article_id: ArticleId, visitor_id: VisitorId) -> LikeState:
        """Remove a visitor's like.

        Removing a like that does not exist changes nothing.

        Raises:
            NotFoundError: If the article does not exist
        """
        with logfire.span(
            "like_service.unlike",
            article_id=str(article_id),
            visitor_id=str(visitor_id),
        ):
            like_count = await self._get_article_like_count(article_id)
            if visitor_id.is_unknown:
                return LikeState(liked=False, like_count=like_count)

            deleted = await self.like_repository.delete_by_article_and_visitor(
                article_id, visitor_id
            )
            if deleted:
                like_count = await self.article_repository.adjust_like_count(
                    article_id, -1
                )
                logfire.info(
                    "Article unliked", article_id=str(article_id), like_count=like_count
                )
            else:
                logfire.info(
                    "No like to remove",
                    article_id=str(article_id),
                    visitor_id=str(visitor_id),
                )
            return LikeState(liked=False, like_count=like_count)

    async def toggle_like(
        self, article_id: ArticleId, visitor_id: VisitorId
    ) -> LikeState:
        """Like the article, or unlike it if the visitor already did."""
        if await self.has_liked(article_id, visitor_id):
            return await self.unlike(article_id, visitor_id)
        return await self.like(article_id, visitor_id)
