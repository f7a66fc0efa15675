"""Domain value objects for Shiki∞Link.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from shiki.domain.value.common import RootValueObject


class ArticleStatus(str, Enum):
    """Publication status of an article."""

    DRAFT = "draft"
    PUBLISHED = "published"


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    New comments always start as pending and only a moderator moves them on.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ArticleSortOrder(str, Enum):
    """Sort order for the public article listing."""

    NEWEST = "newest"  # published_at DESC
    OLDEST = "oldest"  # published_at ASC
    MOST_LIKED = "most_liked"  # like_count DESC
    MOST_VIEWED = "most_viewed"  # view_count DESC


class CategorySlug(RootValueObject[str]):
    """URL-safe category slug used as an article tag.

    Examples: 'react', 'typescript', 'web-design'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Category slug must be lowercase alphanumeric with hyphens"
            )
        if len(v) > 50:
            raise ValueError("Category slug must be 1-50 characters")
        return v


UNKNOWN_VISITOR = "unknown"


class VisitorId(RootValueObject[str]):
    """Best-effort visitor identity used to de-duplicate likes.

    Usually a resolved network address. This is not authentication: two
    visitors behind one address share an identity. When resolution fails the
    sentinel value "unknown" is used, which never matches an existing like.
    """

    @field_validator("root")
    @classmethod
    def validate_visitor_id(cls, v: str) -> str:
        """Validate visitor id is not empty and within length limits."""
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Visitor id must be 1-255 characters")
        return v

    @classmethod
    def unknown(cls) -> "VisitorId":
        """Return the sentinel identity for unresolvable visitors."""
        return cls(UNKNOWN_VISITOR)

    @property
    def is_unknown(self) -> bool:
        """Whether this is the unresolvable-visitor sentinel."""
        return self.root == UNKNOWN_VISITOR
