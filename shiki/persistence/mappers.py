"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from shiki.domain.model import Article, Category, Comment, Like, Member
from shiki.domain.value import (
    ArticleId,
    ArticleStatus,
    CategoryId,
    CategorySlug,
    CommentId,
    CommentStatus,
    LikeId,
    MemberId,
    VisitorId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _naive(value: Optional[datetime]) -> Optional[datetime]:
    """Naive datetimes are written as UTC, so read them back the same way."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def row_to_article(row: Dict[str, Any]) -> Article:
    """Convert database row to Article domain model.

    Args:
        row: Database row as dict

    Returns:
        Article domain model
    """
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        content=row.get("content") or "",
        excerpt=row.get("excerpt") or "",
        status=ArticleStatus(row["status"]),
        category_tags=list(row.get("category_tags") or []),
        created_at=_naive(row["created_at"]),
        updated_at=_naive(row["updated_at"]),
        published_at=_naive(row.get("published_at")),
        view_count=row.get("view_count", 0),
        like_count=row.get("like_count", 0),
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to database dict."""
    data = article.model_dump()
    data["status"] = article.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        author_name=row["author_name"],
        email=row["email"],
        content=row["content"],
        status=CommentStatus(row["status"]),
        created_at=_naive(row["created_at"]),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        article_id=ArticleId(_uuid(row["article_id"])),
        visitor_id=VisitorId(row["visitor_id"]),
        created_at=_naive(row["created_at"]),
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return {
        "id": like.id,
        "article_id": like.article_id,
        "visitor_id": like.visitor_id.root,
        "created_at": like.created_at,
    }


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model."""
    return Category(
        id=CategoryId(_uuid(row["id"])),
        name=row["name"],
        slug=CategorySlug(row["slug"]),
        description=row.get("description") or "",
        color=row.get("color") or "#3b82f6",
        created_at=_naive(row["created_at"]),
    )


def category_to_dict(category: Category) -> Dict[str, Any]:
    """Convert Category domain model to database dict."""
    data = category.model_dump()
    data["slug"] = category.slug.root
    return data


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert database row to Member domain model."""
    return Member(
        id=MemberId(_uuid(row["id"])),
        name=row["name"],
        nickname=row.get("nickname") or "",
        age=row.get("age"),
        birthday=row.get("birthday"),
        position=row.get("position") or "",
        personality=row.get("personality") or "",
        hobbies=row.get("hobbies") or "",
        image_color=row.get("image_color") or "#3b82f6",
        catchphrase=row.get("catchphrase") or "",
        profile_image_url=row.get("profile_image_url"),
        created_at=_naive(row["created_at"]),
        updated_at=_naive(row["updated_at"]),
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    """Convert Member domain model to database dict."""
    return member.model_dump()
