"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from shiki.domain.model import Article, Comment
from shiki.domain.value import ArticleId, ArticleStatus, CommentId, CommentStatus


def make_article(
    title: str = "Test article",
    content: str = "Body",
    status: ArticleStatus = ArticleStatus.PUBLISHED,
    category_tags: list[str] | None = None,
    published_at: datetime | None = None,
    view_count: int = 0,
    like_count: int = 0,
) -> Article:
    """Build an article; published ones default to a fixed publication time."""
    if status == ArticleStatus.PUBLISHED and published_at is None:
        published_at = datetime(2024, 1, 15, 12, 0)
    return Article(
        id=ArticleId(uuid4()),
        title=title,
        content=content,
        status=status,
        category_tags=category_tags or [],
        created_at=published_at or datetime(2024, 1, 1),
        updated_at=published_at or datetime(2024, 1, 1),
        published_at=published_at,
        view_count=view_count,
        like_count=like_count,
    )


def make_comment(
    article_id: ArticleId,
    parent_id: CommentId | None = None,
    content: str = "Nice post",
    created_at: datetime | None = None,
    status: CommentStatus = CommentStatus.APPROVED,
    comment_id: CommentId | None = None,
) -> Comment:
    """Build a comment on ``article_id``."""
    return Comment(
        id=comment_id or CommentId(uuid4()),
        article_id=article_id,
        parent_id=parent_id,
        author_name="Reader",
        email="reader@example.com",
        content=content,
        status=status,
        created_at=created_at or datetime(2024, 2, 1, 10, 0),
    )
