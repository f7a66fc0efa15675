"""Publish/unpublish article use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.service import ArticleService
from shiki.domain.value import ArticleId, ArticleStatus

from .item import ArticleDetail


class SetArticleStatusRequest(BaseModel):
    """Set article status request.

    Without a status the article is toggled between draft and published.
    """

    article_id: str  # UUID string
    status: ArticleStatus | None = None


class SetArticleStatusResponse(BaseModel):
    """Set article status response."""

    article: ArticleDetail


class SetArticleStatusUseCase:
    """Use case for publishing or unpublishing an article."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(
        self, request: SetArticleStatusRequest
    ) -> SetArticleStatusResponse:
        """Execute set status flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        article_id = ArticleId(UUID(request.article_id))
        if request.status is None:
            article = await self.article_service.toggle_status(article_id)
        else:
            article = await self.article_service.set_status(article_id, request.status)
        return SetArticleStatusResponse(article=ArticleDetail.from_domain(article))
