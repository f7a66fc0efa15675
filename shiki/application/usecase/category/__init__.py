"""Category use cases."""

from .list_categories import CategoryItem, ListCategoriesResponse, ListCategoriesUseCase

__all__ = ["CategoryItem", "ListCategoriesResponse", "ListCategoriesUseCase"]
