"""Unit tests for ArticleService."""

from datetime import date, datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from shiki.domain.error import NotFoundError, StoreError, ValidationError
from shiki.domain.repository import ArticleRepository
from shiki.domain.service import ArticleService
from shiki.domain.value import (
    ArticleFilters,
    ArticleId,
    ArticleSortOrder,
    ArticleStatus,
    DateRange,
)
from tests.conftest import make_article
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestListPublished:
    """Tests for list_published."""

    @pytest.mark.asyncio
    async def test_drafts_never_listed(self, unit_env):
        """Only published articles appear, whatever the filters."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        published = await article_repo.save(make_article(title="Live"))
        await article_repo.save(make_article(title="Live draft", status=ArticleStatus.DRAFT))

        # Act
        page = await article_service.list_published(
            ArticleFilters(search_term="live"), page=1, page_size=9
        )

        # Assert
        assert [a.id for a in page.items] == [published.id]
        assert page.total_count == 1

    @pytest.mark.asyncio
    async def test_search_matches_title_or_content_ignoring_case(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        in_title = await article_repo.save(make_article(title="TypeScript tips"))
        in_content = await article_repo.save(
            make_article(title="Tooling", content="We moved to typescript")
        )
        await article_repo.save(make_article(title="Cooking", content="Rice"))

        # Act
        page = await article_service.list_published(
            ArticleFilters(search_term="TYPESCRIPT"), page=1, page_size=9
        )

        # Assert
        assert {a.id for a in page.items} == {in_title.id, in_content.id}

    @pytest.mark.asyncio
    async def test_category_filter_matches_any_tag(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        react = await article_repo.save(make_article(category_tags=["react"]))
        both = await article_repo.save(make_article(category_tags=["vue", "react"]))
        await article_repo.save(make_article(category_tags=["design"]))

        # Act
        page = await article_service.list_published(
            ArticleFilters(categories=("react", "svelte")), page=1, page_size=9
        )

        # Assert
        assert {a.id for a in page.items} == {react.id, both.id}

    @pytest.mark.asyncio
    async def test_date_range_includes_end_day(self, unit_env):
        """An article published late on the end day is inside the range."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        late = await article_repo.save(
            make_article(published_at=datetime(2024, 1, 31, 23, 59, 59, 500000))
        )
        await article_repo.save(make_article(published_at=datetime(2024, 2, 1, 0, 0)))

        # Act
        page = await article_service.list_published(
            ArticleFilters(
                date_range=DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))
            ),
            page=1,
            page_size=9,
        )

        # Assert
        assert [a.id for a in page.items] == [late.id]

    @pytest.mark.asyncio
    async def test_sorted_and_paged(self, unit_env):
        """Page 2 holds what is left after the first page_size results."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        for likes in range(5):
            await article_repo.save(make_article(title=f"a{likes}", like_count=likes))

        # Act
        page = await article_service.list_published(
            ArticleFilters(sort=ArticleSortOrder.MOST_LIKED), page=2, page_size=2
        )

        # Assert
        assert [a.like_count for a in page.items] == [2, 1]
        assert page.total_count == 5
        assert page.total_pages == 3


class TestGetPublishedArticle:
    """Tests for get_published_article and record_view."""

    @pytest.mark.asyncio
    async def test_draft_is_not_found(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        draft = await article_repo.save(make_article(status=ArticleStatus.DRAFT))

        with pytest.raises(NotFoundError):
            await article_service.get_published_article(draft.id)

    @pytest.mark.asyncio
    async def test_unknown_is_not_found(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await article_service.get_published_article(ArticleId(uuid4()))

    @pytest.mark.asyncio
    async def test_record_view_increments(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article(view_count=4))

        # Act
        recorded = await article_service.record_view(article.id)

        # Assert
        assert recorded is True
        assert (await article_repo.find_by_id(article.id)).view_count == 5

    @pytest.mark.asyncio
    async def test_record_view_failure_ignored(self):
        """A failed view increment does not raise."""
        # Arrange
        article_repo = AsyncMock(spec=ArticleRepository)
        article_repo.increment_view_count.side_effect = StoreError(
            "increment_view_count", "timeout"
        )
        article_service = ArticleService(article_repository=article_repo)

        # Act
        recorded = await article_service.record_view(ArticleId(uuid4()))

        # Assert
        assert recorded is False


class TestArticleAdmin:
    """Tests for create, status and delete."""

    @pytest.mark.asyncio
    async def test_create_draft(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)

        # Act
        article = await article_service.create_article(
            title=" Hello ",
            content="Body",
            excerpt="",
            category_tags=["react", " ", "vue "],
            status=ArticleStatus.DRAFT,
        )

        # Assert
        assert article.title == "Hello"
        assert article.status == ArticleStatus.DRAFT
        assert article.published_at is None
        assert article.category_tags == ["react", "vue"]

    @pytest.mark.asyncio
    async def test_create_published_sets_published_at(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        article = await article_service.create_article(
            title="Hello",
            content="",
            excerpt="",
            category_tags=[],
            status=ArticleStatus.PUBLISHED,
        )

        assert article.published_at is not None

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(ValidationError) as exc_info:
            await article_service.create_article(
                title="  ",
                content="",
                excerpt="",
                category_tags=[],
                status=ArticleStatus.DRAFT,
            )
        assert exc_info.value.field == "title"

    @pytest.mark.asyncio
    async def test_unpublish_keeps_published_at(self, unit_env):
        """Going back to draft does not forget the first publication."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        article = await article_repo.save(make_article())

        # Act
        draft = await article_service.toggle_status(article.id)
        republished = await article_service.toggle_status(article.id)

        # Assert
        assert draft.status == ArticleStatus.DRAFT
        assert draft.published_at == article.published_at
        assert republished.published_at == article.published_at

    @pytest.mark.asyncio
    async def test_delete_unknown_article(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(NotFoundError):
            await article_service.delete_article(ArticleId(uuid4()))

    @pytest.mark.asyncio
    async def test_totals_by_status(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)
        await article_repo.save(make_article(view_count=3, like_count=1))
        await article_repo.save(
            make_article(status=ArticleStatus.DRAFT, view_count=7, like_count=2)
        )

        # Act
        everything = await article_service.totals()
        published = await article_service.totals(ArticleStatus.PUBLISHED)

        # Assert
        assert (everything.count, everything.views, everything.likes) == (2, 10, 3)
        assert (published.count, published.views, published.likes) == (1, 3, 1)
