"""List articles use case."""

from datetime import date

import logfire
from pydantic import BaseModel, Field

from shiki.config import ListingSettings
from shiki.domain.service import ArticleService, page_window
from shiki.domain.value import ArticleFilters, ArticleSortOrder, DateRange

from .item import ArticleItem


class ListArticlesRequest(BaseModel):
    """Public listing request: the reader's filter state plus a page."""

    search: str = ""
    categories: list[str] = Field(default_factory=list)
    start_date: date | None = None
    end_date: date | None = None
    sort: ArticleSortOrder = ArticleSortOrder.NEWEST
    page: int = 1  # Values below 1 mean the first page

    def to_filters(self) -> ArticleFilters:
        return ArticleFilters(
            search_term=self.search,
            categories=tuple(self.categories),
            date_range=DateRange(start=self.start_date, end=self.end_date),
            sort=self.sort,
        )


class ListArticlesResponse(BaseModel):
    """One page of published articles."""

    articles: list[ArticleItem]
    total_count: int
    total_pages: int
    page: int
    page_size: int
    page_window: list[int]


class ListArticlesUseCase:
    """Use case for the public article listing with search and filters."""

    def __init__(
        self, article_service: ArticleService, listing_settings: ListingSettings
    ) -> None:
        """Initialize list articles use case.

        Args:
            article_service: Article domain service
            listing_settings: Page size configuration
        """
        self.article_service = article_service
        self.listing_settings = listing_settings

    async def execute(self, request: ListArticlesRequest) -> ListArticlesResponse:
        """Execute list articles flow.

        Args:
            request: Filter state and page

        Returns:
            Page of published articles with pagination data
        """
        with logfire.span("list_articles.execute", page=request.page):
            result = await self.article_service.list_published(
                request.to_filters(),
                page=request.page,
                page_size=self.listing_settings.page_size,
            )
            return ListArticlesResponse(
                articles=[ArticleItem.from_domain(a) for a in result.items],
                total_count=result.total_count,
                total_pages=result.total_pages,
                page=result.page,
                page_size=result.page_size,
                page_window=page_window(result.page, result.total_pages),
            )
