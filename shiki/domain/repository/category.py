"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List

from shiki.domain.model.category import Category


class CategoryRepository(ABC):
    """Repository for Category entity."""

    @abstractmethod
    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name."""
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save a category (create or update)."""
        pass
