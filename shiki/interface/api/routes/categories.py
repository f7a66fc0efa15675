"""Category routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from shiki.application.usecase.category import (
    ListCategoriesResponse,
    ListCategoriesUseCase,
)

router = APIRouter(prefix="/categories", tags=["categories"], route_class=DishkaRoute)


@router.get("", response_model=ListCategoriesResponse)
async def list_categories(
    list_categories_use_case: FromDishka[ListCategoriesUseCase],
) -> ListCategoriesResponse:
    """List categories, for the listing filter chips."""
    return await list_categories_use_case.execute()
