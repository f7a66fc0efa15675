"""Like entity.

A like is the fact that one visitor liked one article. The store keeps at
most one like per (article, visitor) pair.
"""

from datetime import datetime

from pydantic import Field

from shiki.domain.model.common import DomainModel, utc_now
from shiki.domain.value import ArticleId, LikeId, VisitorId


class Like(DomainModel):
    """Like entity."""

    id: LikeId
    article_id: ArticleId
    visitor_id: VisitorId
    created_at: datetime = Field(default_factory=utc_now)
