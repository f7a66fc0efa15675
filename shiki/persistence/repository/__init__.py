"""PostgreSQL repository implementations."""

from shiki.persistence.repository.article import PostgresArticleRepository
from shiki.persistence.repository.category import PostgresCategoryRepository
from shiki.persistence.repository.comment import PostgresCommentRepository
from shiki.persistence.repository.like import PostgresLikeRepository
from shiki.persistence.repository.member import PostgresMemberRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCategoryRepository",
    "PostgresCommentRepository",
    "PostgresLikeRepository",
    "PostgresMemberRepository",
]
