"""Domain value objects for Shiki∞Link."""

from shiki.domain.value.filters import ArticleFilters, DateRange
from shiki.domain.value.identifiers import (
    ArticleId,
    CategoryId,
    CommentId,
    LikeId,
    MemberId,
)
from shiki.domain.value.query import (
    AllOf,
    AnyOf,
    ArticleQuery,
    FieldContains,
    FieldEquals,
    FieldOverlaps,
    FieldRange,
    Predicate,
    SortKey,
)
from shiki.domain.value.types import (
    ArticleSortOrder,
    ArticleStatus,
    CategorySlug,
    CommentStatus,
    VisitorId,
)

__all__ = [
    # Identifiers
    "ArticleId",
    "CommentId",
    "LikeId",
    "CategoryId",
    "MemberId",
    # Types
    "ArticleStatus",
    "CommentStatus",
    "ArticleSortOrder",
    "CategorySlug",
    "VisitorId",
    # Listing
    "ArticleFilters",
    "DateRange",
    # Query
    "AllOf",
    "AnyOf",
    "ArticleQuery",
    "FieldContains",
    "FieldEquals",
    "FieldOverlaps",
    "FieldRange",
    "Predicate",
    "SortKey",
]
