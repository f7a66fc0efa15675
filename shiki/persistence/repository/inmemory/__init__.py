"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .category import InMemoryCategoryRepository
from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .member import InMemoryMemberRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCategoryRepository",
    "InMemoryCommentRepository",
    "InMemoryLikeRepository",
    "InMemoryMemberRepository",
]
