"""Category entity used to tag articles."""

from datetime import datetime

from pydantic import Field

from shiki.domain.model.common import DomainModel, utc_now
from shiki.domain.value import CategoryId, CategorySlug


class Category(DomainModel):
    """Category entity.

    Articles reference categories by slug in their category_tags.
    """

    id: CategoryId
    name: str = Field(min_length=1, max_length=50)
    slug: CategorySlug
    description: str = Field(default="", max_length=200)
    color: str = Field(default="#3b82f6", pattern=r"^#[0-9a-fA-F]{6}$")
    created_at: datetime = Field(default_factory=utc_now)
