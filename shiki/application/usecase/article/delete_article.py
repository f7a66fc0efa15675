"""Delete article use case (admin)."""

from uuid import UUID

from pydantic import BaseModel

from shiki.domain.service import ArticleService
from shiki.domain.value import ArticleId


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    article_id: str  # UUID string


class DeleteArticleUseCase:
    """Use case for deleting an article."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the article does not exist
        """
        await self.article_service.delete_article(ArticleId(UUID(request.article_id)))
