"""List categories use case."""

from pydantic import BaseModel

from shiki.domain.service import CategoryService


class CategoryItem(BaseModel):
    """Category in the filter panel."""

    category_id: str
    name: str
    slug: str
    description: str
    color: str


class ListCategoriesResponse(BaseModel):
    """Categories ordered by name."""

    categories: list[CategoryItem]


class ListCategoriesUseCase:
    """Use case for listing the categories readers can filter by."""

    def __init__(self, category_service: CategoryService) -> None:
        self.category_service = category_service

    async def execute(self, request: None = None) -> ListCategoriesResponse:
        categories = await self.category_service.list_categories()
        return ListCategoriesResponse(
            categories=[
                CategoryItem(
                    category_id=str(c.id),
                    name=c.name,
                    slug=c.slug.root,
                    description=c.description,
                    color=c.color,
                )
                for c in categories
            ]
        )
