"""Store-neutral query description.

The article query planner produces these value objects and each store
implementation (SQLAlchemy, in-memory) interprets them. Predicates compose
with ``AllOf`` (AND) and ``AnyOf`` (OR).
"""

from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import Field

from shiki.domain.value.common import ValueObject


class FieldEquals(ValueObject):
    """``field = value``."""

    kind: Literal["eq"] = "eq"
    field: str
    value: str


class FieldContains(ValueObject):
    """Case-insensitive substring match on a text field."""

    kind: Literal["contains"] = "contains"
    field: str
    term: str = Field(min_length=1)


class FieldOverlaps(ValueObject):
    """Array field shares at least one element with ``values``."""

    kind: Literal["overlaps"] = "overlaps"
    field: str
    values: tuple[str, ...] = Field(min_length=1)


class FieldRange(ValueObject):
    """Inclusive range on a timestamp field; either bound may be open."""

    kind: Literal["range"] = "range"
    field: str
    gte: datetime | None = None
    lte: datetime | None = None


class AnyOf(ValueObject):
    """OR composition."""

    kind: Literal["or"] = "or"
    predicates: tuple["Predicate", ...]


class AllOf(ValueObject):
    """AND composition."""

    kind: Literal["and"] = "and"
    predicates: tuple["Predicate", ...]


Predicate = Annotated[
    Union[FieldEquals, FieldContains, FieldOverlaps, FieldRange, AnyOf, AllOf],
    Field(discriminator="kind"),
]

AnyOf.model_rebuild()
AllOf.model_rebuild()


class SortKey(ValueObject):
    """Single-column ordering. Ties fall back to the store's natural order."""

    field: str
    descending: bool = True


class ArticleQuery(ValueObject):
    """One bounded fetch against the article store."""

    where: AllOf
    order_by: SortKey
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)
