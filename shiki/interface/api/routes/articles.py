"""Article routes."""

from datetime import date

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from shiki.application.usecase.article import (
    GetArticleRequest,
    GetArticleResponse,
    GetArticleUseCase,
    ListArticlesRequest,
    ListArticlesResponse,
    ListArticlesUseCase,
)
from shiki.domain.value import ArticleSortOrder

router = APIRouter(prefix="/articles", tags=["articles"], route_class=DishkaRoute)


@router.get("", response_model=ListArticlesResponse)
async def list_articles(
    list_articles_use_case: FromDishka[ListArticlesUseCase],
    search: str = "",
    category: list[str] = Query(default_factory=list),
    start_date: date | None = None,
    end_date: date | None = None,
    sort: ArticleSortOrder = ArticleSortOrder.NEWEST,
    page: int = 1,
) -> ListArticlesResponse:
    """List published articles with search, filters and pagination.

    Args:
        list_articles_use_case: List articles use case from DI
        search: Case-insensitive term matched against title and content
        category: Category tags; an article matches if it has any of them
        start_date: Earliest publication date (inclusive)
        end_date: Latest publication date (inclusive)
        sort: Sort order
        page: 1-based page number

    Returns:
        One page of article summaries with paging metadata
    """
    request = ListArticlesRequest(
        search=search,
        categories=category,
        start_date=start_date,
        end_date=end_date,
        sort=sort,
        page=page,
    )
    return await list_articles_use_case.execute(request)


@router.get("/{article_id}", response_model=GetArticleResponse)
async def get_article(
    article_id: str,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> GetArticleResponse:
    """Get a published article and count the view.

    Args:
        article_id: Article UUID
        get_article_use_case: Get article use case from DI

    Returns:
        Article with full content
    """
    return await get_article_use_case.execute(GetArticleRequest(article_id=article_id))
