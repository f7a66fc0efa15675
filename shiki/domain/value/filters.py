"""Listing filter state chosen by a reader."""

from datetime import date

from pydantic import Field

from shiki.domain.value.common import ValueObject
from shiki.domain.value.types import ArticleSortOrder


class DateRange(ValueObject):
    """Inclusive calendar-day range; either end may be absent."""

    start: date | None = None
    end: date | None = None

    @property
    def is_open(self) -> bool:
        """True when neither bound is set."""
        return self.start is None and self.end is None


class ArticleFilters(ValueObject):
    """Search, category, date and sort criteria for the article listing.

    Ephemeral UI state. The page number travels separately because only the
    pagination controls change it without resetting the filters.
    """

    search_term: str = ""
    categories: tuple[str, ...] = Field(default_factory=tuple)
    date_range: DateRange = Field(default_factory=DateRange)
    sort: ArticleSortOrder = ArticleSortOrder.NEWEST

    @property
    def normalized_search(self) -> str | None:
        """Trimmed search term, or None when blank."""
        term = self.search_term.strip()
        return term or None

    @property
    def selected_categories(self) -> tuple[str, ...]:
        """Selected slugs without blanks or duplicates, in selection order."""
        seen: dict[str, None] = {}
        for slug in self.categories:
            slug = slug.strip()
            if slug:
                seen.setdefault(slug, None)
        return tuple(seen)

    @property
    def has_active_filters(self) -> bool:
        """Whether anything differs from the default newest-first listing."""
        return bool(
            self.normalized_search
            or self.selected_categories
            or not self.date_range.is_open
            or self.sort != ArticleSortOrder.NEWEST
        )
