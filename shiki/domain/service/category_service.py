"""Category domain service."""

import logfire

from shiki.domain.model.category import Category
from shiki.domain.repository import CategoryRepository

from .base import Service


class CategoryService(Service):
    """Domain service for category operations."""

    def __init__(self, category_repository: CategoryRepository) -> None:
        """Initialize category service.

        Args:
            category_repository: Category repository
        """
        self.category_repository = category_repository

    async def list_categories(self) -> list[Category]:
        """All categories ordered by name."""
        with logfire.span("category_service.list_categories"):
            categories = await self.category_repository.find_all()
            logfire.info("Categories listed", count=len(categories))
            return categories
