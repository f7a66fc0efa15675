"""Article aggregate root.

Articles are the publishable content of the site. They start as drafts and
become visible to readers once published.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from shiki.domain.model.common import DomainModel, utc_now
from shiki.domain.value import ArticleId, ArticleStatus


class Article(DomainModel):
    """Article aggregate root.

    Lifecycle rules:
    - published_at is set the first time the article is published and is
      kept if the article goes back to draft
    - view_count only grows; like_count never drops below zero
    """

    id: ArticleId
    title: str = Field(min_length=1, max_length=300)
    content: str = ""
    excerpt: str = Field(default="", max_length=1000)
    status: ArticleStatus = ArticleStatus.DRAFT
    category_tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    published_at: Optional[datetime] = None
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def validate_published_at(self) -> "Article":
        """A published article must carry its publication timestamp."""
        if self.status == ArticleStatus.PUBLISHED and self.published_at is None:
            raise ValueError("Published articles require published_at")
        return self

    @property
    def is_published(self) -> bool:
        return self.status == ArticleStatus.PUBLISHED

    def with_status(self, status: ArticleStatus, now: datetime) -> "Article":
        """Return a copy moved to ``status``.

        published_at is stamped only on the first publication.
        """
        update: dict = {"status": status, "updated_at": now}
        if status == ArticleStatus.PUBLISHED and self.published_at is None:
            update["published_at"] = now
        return self.model_copy(update=update)
