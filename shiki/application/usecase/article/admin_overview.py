"""Admin console overview use case."""

import logfire
from pydantic import BaseModel

from shiki.domain.service import ArticleService
from shiki.domain.value import ArticleStatus

from .item import ArticleItem


class DashboardStats(BaseModel):
    """Totals shown at the top of the admin console."""

    total_articles: int
    published_articles: int
    total_views: int
    total_likes: int


class AdminOverviewResponse(BaseModel):
    """Every article plus the dashboard totals."""

    stats: DashboardStats
    articles: list[ArticleItem]


class AdminOverviewUseCase:
    """Use case for the admin console landing view."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: None = None) -> AdminOverviewResponse:
        """Execute admin overview flow.

        Returns:
            All articles (any status), newest created first, with totals
        """
        with logfire.span("admin_overview.execute"):
            articles = await self.article_service.list_all()
            totals = await self.article_service.totals()
            published = await self.article_service.totals(ArticleStatus.PUBLISHED)

            return AdminOverviewResponse(
                stats=DashboardStats(
                    total_articles=totals.count,
                    published_articles=published.count,
                    total_views=totals.views,
                    total_likes=totals.likes,
                ),
                articles=[ArticleItem.from_domain(a) for a in articles],
            )
