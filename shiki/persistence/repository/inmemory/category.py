"""In-memory category repository for testing."""

from shiki.domain.model.category import Category
from shiki.domain.repository.category import CategoryRepository
from shiki.domain.value import CategoryId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_all(self) -> list[Category]:
        """Find all categories ordered by name."""
        return sorted(self._categories.values(), key=lambda c: c.name)

    async def save(self, category: Category) -> Category:
        """Save a category."""
        self._categories[category.id] = category
        return category
