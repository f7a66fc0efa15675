"""Unit tests for the article listing controller."""

import asyncio
from datetime import date
from unittest.mock import AsyncMock

import pytest

from shiki.application.controller.article_listing import (
    LOAD_FAILED_NOTICE,
    ArticleListingController,
)
from shiki.config import ListingSettings
from shiki.domain.error import StoreError
from shiki.domain.repository import ArticleRepository
from shiki.domain.service import ArticlePage, ArticleService
from shiki.domain.value import ArticleSortOrder
from shiki.util.debounce import Debouncer
from tests.conftest import make_article
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _controller(article_service, clock=None, page_size=2):
    return ArticleListingController(
        article_service=article_service,
        page_size=page_size,
        search_debouncer=Debouncer(0.3, clock=clock or FakeClock()),
    )


def _page(items, total, page=1):
    return ArticlePage(
        items=items,
        total_count=total,
        total_pages=max(1, -(-total // 2)),
        page=page,
        page_size=2,
    )


class TestListing:
    """Fetching and paging."""

    @pytest.mark.asyncio
    async def test_load_first_page(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        for i in range(3):
            await article_repo.save(make_article(title=f"a{i}"))
        controller = _controller(await unit_env.get(ArticleService))

        # Act
        applied = await controller.load()

        # Assert
        assert applied is True
        assert len(controller.articles) == 2
        assert controller.total_count == 3
        assert controller.total_pages == 2
        assert controller.page_window == [1, 2]
        assert controller.loading is False

    @pytest.mark.asyncio
    async def test_filter_change_resets_page(self, unit_env):
        """Changing the sort after paging goes back to page 1."""
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        for i in range(5):
            await article_repo.save(make_article(title=f"a{i}", like_count=i))
        controller = _controller(await unit_env.get(ArticleService))
        await controller.load()
        await controller.go_to_page(3)

        # Act
        await controller.set_sort(ArticleSortOrder.MOST_LIKED)

        # Assert
        assert controller.page == 1
        assert [a.like_count for a in controller.articles] == [4, 3]

    @pytest.mark.asyncio
    async def test_pagination_keeps_filters(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        for i in range(3):
            await article_repo.save(make_article(category_tags=["react"]))
        await article_repo.save(make_article(category_tags=["vue"]))
        controller = _controller(await unit_env.get(ArticleService))
        await controller.set_categories(["react"])

        # Act
        await controller.go_to_page(2)

        # Assert
        assert controller.filters.categories == ("react",)
        assert controller.page == 2
        assert len(controller.articles) == 1

    @pytest.mark.asyncio
    async def test_go_to_page_clamped(self, unit_env):
        controller = _controller(await unit_env.get(ArticleService))
        await controller.load()

        await controller.go_to_page(7)

        assert controller.page == 1

    @pytest.mark.asyncio
    async def test_date_range_and_clear(self, unit_env):
        # Arrange
        controller = _controller(await unit_env.get(ArticleService))
        await controller.set_date_range(date(2024, 1, 1), date(2024, 1, 31))
        assert controller.can_clear_filters

        # Act
        cleared = await controller.clear_filters()

        # Assert
        assert cleared is True
        assert not controller.can_clear_filters
        assert controller.filters.date_range.is_open

    @pytest.mark.asyncio
    async def test_clear_without_filters_does_not_fetch(self):
        # Arrange
        article_service = AsyncMock(spec=ArticleService)
        controller = _controller(article_service)

        # Act
        cleared = await controller.clear_filters()

        # Assert
        assert cleared is False
        article_service.list_published.assert_not_called()


class TestSearchDebounce:
    """Search typing waits for the quiet period."""

    @pytest.mark.asyncio
    async def test_search_runs_after_quiet_period(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        react = await article_repo.save(make_article(title="React"))
        await article_repo.save(make_article(title="Vue"))
        clock = FakeClock()
        controller = _controller(await unit_env.get(ArticleService), clock=clock)
        await controller.load()

        # Act
        controller.set_search("rea")
        early = await controller.poll_search()
        clock.now += 0.3
        settled = await controller.poll_search()

        # Assert
        assert early is False
        assert settled is True
        assert [a.id for a in controller.articles] == [react.id]

    @pytest.mark.asyncio
    async def test_submit_search_skips_quiet_period(self, unit_env):
        # Arrange
        article_repo = await unit_env.get(ArticleRepository)
        react = await article_repo.save(make_article(title="React"))
        await article_repo.save(make_article(title="Vue"))
        clock = FakeClock()
        controller = _controller(await unit_env.get(ArticleService), clock=clock)
        controller.set_search("react")

        # Act
        submitted = await controller.submit_search()
        clock.now += 1
        later = await controller.poll_search()

        # Assert
        assert submitted is True
        assert later is False
        assert [a.id for a in controller.articles] == [react.id]

    @pytest.mark.asyncio
    async def test_immediate_filter_cancels_pending_search(self, unit_env):
        """A category change fetches with the typed term right away."""
        # Arrange
        clock = FakeClock()
        controller = _controller(await unit_env.get(ArticleService), clock=clock)
        controller.set_search("react")

        # Act
        await controller.set_categories(["react"])
        clock.now += 1

        # Assert
        assert controller.filters.search_term == "react"
        assert await controller.poll_search() is False


class TestStaleResponses:
    """Out-of-order responses."""

    @pytest.mark.asyncio
    async def test_slow_earlier_response_discarded(self):
        """The later request's results win even if the earlier one lands last."""
        # Arrange
        slow_started = asyncio.Event()
        release_slow = asyncio.Event()
        stale = make_article(title="stale")
        fresh = make_article(title="fresh")

        async def list_published(filters, page, page_size):
            if filters.sort == ArticleSortOrder.NEWEST:
                slow_started.set()
                await release_slow.wait()
                return _page([stale], 1)
            return _page([fresh], 1)

        article_service = AsyncMock(spec=ArticleService)
        article_service.list_published.side_effect = list_published
        controller = _controller(article_service)

        # Act
        slow = asyncio.create_task(controller.load())
        await slow_started.wait()
        fast_applied = await controller.set_sort(ArticleSortOrder.MOST_VIEWED)
        release_slow.set()
        slow_applied = await slow

        # Assert
        assert fast_applied is True
        assert slow_applied is False
        assert [a.title for a in controller.articles] == ["fresh"]

    @pytest.mark.asyncio
    async def test_store_error_keeps_items_and_sets_notice(self):
        # Arrange
        article = make_article()
        article_service = AsyncMock(spec=ArticleService)
        article_service.list_published.return_value = _page([article], 1)
        controller = _controller(article_service)
        await controller.load()
        article_service.list_published.side_effect = StoreError("article.find_page")

        # Act
        applied = await controller.set_sort(ArticleSortOrder.OLDEST)

        # Assert
        assert applied is False
        assert controller.articles == [article]
        assert controller.notice == LOAD_FAILED_NOTICE
        assert controller.loading is False

        controller.dismiss_notice()
        assert controller.notice is None


class TestFromSettings:
    """Building a controller from listing settings."""

    def test_uses_configured_page_size_and_quiet_period(self):
        # Arrange
        settings = ListingSettings(page_size=12, search_debounce_seconds=0.5)

        # Act
        controller = ArticleListingController.from_settings(
            AsyncMock(spec=ArticleService), settings
        )

        # Assert
        assert controller.page_size == 12
        assert controller.search_debouncer.quiet_period == 0.5
        assert controller.page == 1
        assert controller.articles == []
