"""Domain model entities for Shiki∞Link."""

from shiki.domain.model.article import Article
from shiki.domain.model.category import Category
from shiki.domain.model.comment import Comment
from shiki.domain.model.like import Like
from shiki.domain.model.member import Member
from shiki.domain.model.common import utc_now

__all__ = [
    "Article",
    "Category",
    "Comment",
    "Like",
    "Member",
    "utc_now",
]
