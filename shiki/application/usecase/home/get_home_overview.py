"""Home page overview use case."""

from datetime import datetime, timedelta

import logfire
from pydantic import BaseModel

from shiki.application.usecase.article.item import ArticleItem
from shiki.application.usecase.member.item import MemberItem
from shiki.config import ListingSettings
from shiki.domain.model import utc_now
from shiki.domain.service import ArticleService, MemberService
from shiki.domain.value import ArticleStatus


class HomeStats(BaseModel):
    """Site counters shown on the home page."""

    published_articles: int
    total_views: int
    published_this_month: int


class HomeOverviewResponse(BaseModel):
    """Home overview response."""

    latest_articles: list[ArticleItem]
    members: list[MemberItem]
    stats: HomeStats


def month_bounds(now: datetime) -> tuple[datetime, datetime]:
    """First and last instant of the calendar month containing ``now``."""
    start = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    if start.month == 12:
        next_month = start.replace(year=start.year + 1, month=1)
    else:
        next_month = start.replace(month=start.month + 1)
    return start, next_month - timedelta(microseconds=1)


class GetHomeOverviewUseCase:
    """Use case for the home page: latest articles, members and counters."""

    def __init__(
        self,
        article_service: ArticleService,
        member_service: MemberService,
        listing_settings: ListingSettings,
    ) -> None:
        """Initialize home overview use case.

        Args:
            article_service: Article domain service
            member_service: Member domain service
            listing_settings: Latest-articles limit
        """
        self.article_service = article_service
        self.member_service = member_service
        self.listing_settings = listing_settings

    async def execute(self, request: None = None) -> HomeOverviewResponse:
        """Execute home overview flow."""
        with logfire.span("get_home_overview.execute"):
            latest = await self.article_service.latest_published(
                self.listing_settings.latest_articles_limit
            )
            members = await self.member_service.list_members()
            published = await self.article_service.totals(ArticleStatus.PUBLISHED)
            start, end = month_bounds(utc_now())
            this_month = await self.article_service.count_published_between(start, end)

            return HomeOverviewResponse(
                latest_articles=[ArticleItem.from_domain(a) for a in latest],
                members=[MemberItem.from_domain(m) for m in members],
                stats=HomeStats(
                    published_articles=published.count,
                    total_views=published.views,
                    published_this_month=this_month,
                ),
            )
