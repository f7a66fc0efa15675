"""Home page routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from shiki.application.usecase.home import GetHomeOverviewUseCase, HomeOverviewResponse

router = APIRouter(prefix="/home", tags=["home"], route_class=DishkaRoute)


@router.get("", response_model=HomeOverviewResponse)
async def get_home_overview(
    home_overview_use_case: FromDishka[GetHomeOverviewUseCase],
) -> HomeOverviewResponse:
    """Latest articles, members and site statistics."""
    return await home_overview_use_case.execute()
