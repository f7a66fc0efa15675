"""Repository interfaces for Shiki∞Link domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from shiki.domain.repository.article import ArticleRepository, ArticleTotals
from shiki.domain.repository.category import CategoryRepository
from shiki.domain.repository.comment import CommentRepository
from shiki.domain.repository.like import LikeRepository
from shiki.domain.repository.member import MemberRepository

__all__ = [
    "ArticleRepository",
    "ArticleTotals",
    "CategoryRepository",
    "CommentRepository",
    "LikeRepository",
    "MemberRepository",
]
