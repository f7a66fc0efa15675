"""Create article use case (admin)."""

from pydantic import BaseModel, Field

from shiki.domain.service import ArticleService
from shiki.domain.value import ArticleStatus

from .item import ArticleDetail


class CreateArticleRequest(BaseModel):
    """Create article request."""

    title: str
    content: str = ""
    excerpt: str = ""
    category_tags: list[str] = Field(default_factory=list)
    status: ArticleStatus = ArticleStatus.DRAFT


class CreateArticleResponse(BaseModel):
    """Create article response."""

    article: ArticleDetail


class CreateArticleUseCase:
    """Use case for creating an article from the admin console."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: CreateArticleRequest) -> CreateArticleResponse:
        """Execute create article flow.

        Raises:
            ValidationError: If the title is blank
        """
        article = await self.article_service.create_article(
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            category_tags=request.category_tags,
            status=request.status,
        )
        return CreateArticleResponse(article=ArticleDetail.from_domain(article))
