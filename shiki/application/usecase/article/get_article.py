"""Get article use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from shiki.domain.service import ArticleService
from shiki.domain.value import ArticleId

from .item import ArticleDetail


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: str  # UUID string
    record_view: bool = True


class GetArticleResponse(BaseModel):
    """Get article response."""

    article: ArticleDetail


class GetArticleUseCase:
    """Use case for the article detail page.

    Each visit counts one view. The view is recorded after the read and a
    failure to record it never fails the request.
    """

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize get article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> GetArticleResponse:
        """Execute get article flow.

        Raises:
            NotFoundError: If the article does not exist or is not published
        """
        article_id = ArticleId(UUID(request.article_id))
        with logfire.span("get_article.execute", article_id=request.article_id):
            article = await self.article_service.get_published_article(article_id)

            if request.record_view:
                recorded = await self.article_service.record_view(article_id)
                if recorded:
                    article = article.model_copy(
                        update={"view_count": article.view_count + 1}
                    )

            return GetArticleResponse(article=ArticleDetail.from_domain(article))
