"""Article representations shared by the article use cases."""

from datetime import datetime

from pydantic import BaseModel

from shiki.domain.model import Article
from shiki.domain.value import ArticleStatus


class ArticleItem(BaseModel):
    """Article card in listings (no body)."""

    article_id: str
    title: str
    excerpt: str
    status: ArticleStatus
    category_tags: list[str]
    created_at: datetime
    published_at: datetime | None
    view_count: int
    like_count: int

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleItem":
        return cls(
            article_id=str(article.id),
            title=article.title,
            excerpt=article.excerpt,
            status=article.status,
            category_tags=list(article.category_tags),
            created_at=article.created_at,
            published_at=article.published_at,
            view_count=article.view_count,
            like_count=article.like_count,
        )


class ArticleDetail(ArticleItem):
    """Full article, as shown on the detail page and in the admin console."""

    content: str
    updated_at: datetime

    @classmethod
    def from_domain(cls, article: Article) -> "ArticleDetail":
        return cls(
            **ArticleItem.from_domain(article).model_dump(),
            content=article.content,
            updated_at=article.updated_at,
        )
