"""Article listing state for the blog page.

Holds the reader's filter state and the page of articles currently shown,
and decides when to fetch:

- search typing is debounced; the fetch runs once input has settled
- category, date range and sort changes fetch immediately
- any filter change goes back to page 1; only pagination keeps the filters

Every fetch carries a request token. A response that arrives after a newer
request was issued is dropped, so a slow earlier query can never overwrite
the results of a later one.
"""

from datetime import date
from typing import Iterable, Optional

import logfire

from shiki.config import ListingSettings
from shiki.domain.error import StoreError
from shiki.domain.model import Article
from shiki.domain.service import ArticleService, page_window
from shiki.domain.value import ArticleFilters, ArticleSortOrder, DateRange
from shiki.util.debounce import Debouncer
from shiki.util.sequence import RequestSequence

LOAD_FAILED_NOTICE = "Articles could not be loaded. Please try again."


class ArticleListingController:
    """Filter state plus the currently displayed page of articles."""

    def __init__(
        self,
        article_service: ArticleService,
        page_size: int,
        search_debouncer: Debouncer[str],
    ) -> None:
        """Initialize listing controller.

        Args:
            article_service: Article domain service
            page_size: Articles per page
            search_debouncer: Quiet-period timer for search input
        """
        self.article_service = article_service
        self.page_size = page_size
        self.search_debouncer = search_debouncer
        self.sequence = RequestSequence()

        self.filters = ArticleFilters()
        self.page = 1
        self.articles: list[Article] = []
        self.total_count = 0
        self.total_pages = 1
        self.loading = False
        self.notice: Optional[str] = None

    @classmethod
    def from_settings(
        cls, article_service: ArticleService, settings: ListingSettings
    ) -> "ArticleListingController":
        """Build a controller using the configured page size and quiet period."""
        return cls(
            article_service,
            page_size=settings.page_size,
            search_debouncer=Debouncer(settings.search_debounce_seconds),
        )

    @property
    def page_window(self) -> list[int]:
        return page_window(self.page, self.total_pages)

    async def load(self) -> bool:
        """Fetch the current page for the current filters."""
        return await self._fetch()

    def set_search(self, term: str) -> None:
        """Record typed search input; the fetch waits for the quiet period."""
        self.filters = self.filters.model_copy(update={"search_term": term})
        self.page = 1
        self.search_debouncer.submit(term)

    async def poll_search(self) -> bool:
        """Run the search fetch if the quiet period has elapsed.

        Returns:
            True if a fetch ran and its result was applied
        """
        if self.search_debouncer.poll() is None:
            return False
        return await self._fetch()

    async def submit_search(self) -> bool:
        """Run the pending search now, as when the reader presses Enter."""
        if self.search_debouncer.flush() is None:
            return False
        return await self._fetch()

    async def settle_search(self) -> bool:
        """Wait out the quiet period, then run the search fetch."""
        if await self.search_debouncer.wait() is None:
            return False
        return await self._fetch()

    async def set_categories(self, categories: Iterable[str]) -> bool:
        """Change the selected categories and fetch page 1."""
        return await self._apply(categories=tuple(categories))

    async def set_date_range(
        self, start: Optional[date] = None, end: Optional[date] = None
    ) -> bool:
        """Change the date range and fetch page 1."""
        return await self._apply(date_range=DateRange(start=start, end=end))

    async def set_sort(self, sort: ArticleSortOrder) -> bool:
        """Change the sort order and fetch page 1."""
        return await self._apply(sort=sort)

    @property
    def can_clear_filters(self) -> bool:
        return self.filters.has_active_filters

    async def clear_filters(self) -> bool:
        """Back to the default newest-first listing.

        Does nothing when no filter is set.
        """
        if not self.can_clear_filters:
            return False
        self.search_debouncer.cancel()
        self.filters = ArticleFilters()
        self.page = 1
        return await self._fetch()

    async def go_to_page(self, page: int) -> bool:
        """Show another page with the same filters."""
        self.page = min(max(page, 1), self.total_pages)
        return await self._fetch()

    def dismiss_notice(self) -> None:
        self.notice = None

    async def _apply(self, **changes) -> bool:
        self.filters = self.filters.model_copy(update=changes)
        self.page = 1
        # The immediate fetch already carries the latest search input
        self.search_debouncer.cancel()
        return await self._fetch()

    async def _fetch(self) -> bool:
        token = self.sequence.issue()
        filters, page = self.filters, self.page
        self.loading = True
        with logfire.span("article_listing.fetch", token=token, page=page):
            try:
                result = await self.article_service.list_published(
                    filters, page, self.page_size
                )
            except StoreError as e:
                if not self.sequence.is_current(token):
                    logfire.debug("Stale listing failure ignored", token=token)
                    return False
                logfire.warn("Listing fetch failed", token=token, error=str(e))
                self.notice = LOAD_FAILED_NOTICE
                self.loading = False
                return False

            if not self.sequence.is_current(token):
                logfire.info(
                    "Stale listing response discarded",
                    token=token,
                    latest=self.sequence.latest,
                )
                return False

            self.articles = list(result.items)
            self.total_count = result.total_count
            self.total_pages = result.total_pages
            self.page = result.page
            self.notice = None
            self.loading = False
            return True
