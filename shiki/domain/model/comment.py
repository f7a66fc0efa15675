"""Comment entity.

Comments are threaded reader contributions on an article. A reply points at
its parent by id only; the thread structure is rebuilt on read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from shiki.domain.model.common import DomainModel, utc_now
from shiki.domain.value import ArticleId, CommentId, CommentStatus


class Comment(DomainModel):
    """Comment entity.

    - parent_id: Parent comment (None for top-level)
    - email: Collected on submission, never rendered
    - status: Only approved comments are shown to readers
    """

    id: CommentId
    article_id: ArticleId
    parent_id: Optional[CommentId] = None
    author_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=255, repr=False)
    content: str = Field(min_length=1, max_length=10000)
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime = Field(default_factory=utc_now)
