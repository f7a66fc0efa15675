"""PostgreSQL implementation of Category repository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from shiki.domain.model import Category
from shiki.domain.repository import CategoryRepository
from shiki.persistence.error import store_errors
from shiki.persistence.mappers import category_to_dict, row_to_category
from shiki.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_all(self) -> List[Category]:
        """Find all categories ordered by name."""
        with store_errors("category.find_all"):
            stmt = select(categories_table).order_by(categories_table.c.name)
            result = await self.session.execute(stmt)
            return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def save(self, category: Category) -> Category:
        """Save a category (create or update by id)."""
        with store_errors("category.save"):
            values = category_to_dict(category)
            stmt = insert(categories_table).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=[categories_table.c.id],
                set_={k: v for k, v in values.items() if k != "id"},
            )
            await self.session.execute(stmt)
            await self.session.flush()
            return category
