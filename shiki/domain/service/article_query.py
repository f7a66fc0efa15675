"""Article listing query planner.

Maps a reader's filter state and page number to one bounded store query,
and turns the store's total count back into a page count.
"""

import math
from datetime import datetime, time
from typing import Sequence

import logfire
from pydantic import BaseModel, Field

from shiki.domain.model.article import Article
from shiki.domain.value import (
    AllOf,
    AnyOf,
    ArticleFilters,
    ArticleQuery,
    ArticleSortOrder,
    ArticleStatus,
    FieldContains,
    FieldEquals,
    FieldOverlaps,
    FieldRange,
    Predicate,
    SortKey,
)

SORT_KEYS: dict[ArticleSortOrder, SortKey] = {
    ArticleSortOrder.NEWEST: SortKey(field="published_at", descending=True),
    ArticleSortOrder.OLDEST: SortKey(field="published_at", descending=False),
    ArticleSortOrder.MOST_LIKED: SortKey(field="like_count", descending=True),
    ArticleSortOrder.MOST_VIEWED: SortKey(field="view_count", descending=True),
}


class ArticlePage(BaseModel):
    """One page of listing results."""

    items: list[Article]
    total_count: int = Field(ge=0)
    total_pages: int = Field(ge=1)
    page: int = Field(ge=1)
    page_size: int = Field(ge=1)


def clamp_page(page: int) -> int:
    """Pages are 1-based; anything lower means the first page."""
    return max(1, page)


def plan_article_query(
    filters: ArticleFilters, page: int, page_size: int
) -> ArticleQuery:
    """Build the listing query for ``filters`` at ``page``.

    Only published articles are ever matched. Search is a case-insensitive
    substring match on title OR content; categories match when the article
    carries ANY selected tag; the date range covers whole calendar days.

    Args:
        filters: Reader's filter state
        page: 1-based page number (values below 1 are clamped)
        page_size: Articles per page

    Returns:
        Store-neutral query description
    """
    if page_size < 1:
        raise ValueError("page_size must be at least 1")

    predicates: list[Predicate] = [
        FieldEquals(field="status", value=ArticleStatus.PUBLISHED.value)
    ]

    term = filters.normalized_search
    if term:
        predicates.append(
            AnyOf(
                predicates=(
                    FieldContains(field="title", term=term),
                    FieldContains(field="content", term=term),
                )
            )
        )

    categories = filters.selected_categories
    if categories:
        predicates.append(FieldOverlaps(field="category_tags", values=categories))

    date_range = filters.date_range
    if not date_range.is_open:
        predicates.append(
            FieldRange(
                field="published_at",
                gte=(
                    datetime.combine(date_range.start, time.min)
                    if date_range.start
                    else None
                ),
                lte=(
                    datetime.combine(date_range.end, time.max)
                    if date_range.end
                    else None
                ),
            )
        )

    page = clamp_page(page)
    query = ArticleQuery(
        where=AllOf(predicates=tuple(predicates)),
        order_by=SORT_KEYS[filters.sort],
        offset=(page - 1) * page_size,
        limit=page_size,
    )
    logfire.debug(
        "Article query planned",
        search=term,
        categories=list(categories),
        sort=filters.sort.value,
        offset=query.offset,
        limit=query.limit,
    )
    return query


def total_pages(total_count: int, page_size: int) -> int:
    """Number of pages for ``total_count`` results; never less than one."""
    return max(1, math.ceil(max(total_count, 0) / page_size))


def interpret_article_result(
    items: Sequence[Article], total_count: int, page: int, page_size: int
) -> ArticlePage:
    """Wrap a store response into a page with its page count."""
    return ArticlePage(
        items=list(items),
        total_count=max(total_count, 0),
        total_pages=total_pages(total_count, page_size),
        page=clamp_page(page),
        page_size=page_size,
    )


def page_window(current: int, total: int, size: int = 5) -> list[int]:
    """Page numbers for a pagination bar of at most ``size`` buttons.

    The window slides with the current page and stays inside 1..total.
    """
    total = max(total, 1)
    current = min(max(current, 1), total)
    if total <= size:
        return list(range(1, total + 1))
    half = size // 2
    start = min(max(current - half, 1), total - size + 1)
    return list(range(start, start + size))
