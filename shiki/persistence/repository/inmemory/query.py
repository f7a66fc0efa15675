"""Evaluate store-neutral article queries against in-memory records.

Mirrors the SQL semantics of ``shiki.persistence.query``: NULL never matches
a comparison, substring matches ignore case, and NULLs sort last.
"""

from enum import Enum
from typing import Any, Sequence, TypeVar

from pydantic import BaseModel

from shiki.domain.value import (
    AllOf,
    AnyOf,
    FieldContains,
    FieldEquals,
    FieldOverlaps,
    FieldRange,
    Predicate,
    SortKey,
)

RecordT = TypeVar("RecordT", bound=BaseModel)


def _value(record: BaseModel, field: str) -> Any:
    if field not in type(record).model_fields:
        raise ValueError(f"Unknown field {field!r} on {type(record).__name__}")
    value = getattr(record, field)
    return value.value if isinstance(value, Enum) else value


def matches(predicate: Predicate, record: BaseModel) -> bool:
    """Whether ``record`` satisfies ``predicate``."""
    if isinstance(predicate, AllOf):
        return all(matches(p, record) for p in predicate.predicates)
    if isinstance(predicate, AnyOf):
        return any(matches(p, record) for p in predicate.predicates)

    value = _value(record, predicate.field)
    if value is None:
        return False
    if isinstance(predicate, FieldEquals):
        return str(value) == predicate.value
    if isinstance(predicate, FieldContains):
        return predicate.term.lower() in str(value).lower()
    if isinstance(predicate, FieldOverlaps):
        return not set(value).isdisjoint(predicate.values)
    if isinstance(predicate, FieldRange):
        if predicate.gte is not None and value < predicate.gte:
            return False
        if predicate.lte is not None and value > predicate.lte:
            return False
        return True
    raise ValueError(f"Unsupported predicate: {predicate!r}")


def sort_records(records: Sequence[RecordT], sort: SortKey) -> list[RecordT]:
    """Stable sort by one field, NULLs last."""
    present = [r for r in records if _value(r, sort.field) is not None]
    missing = [r for r in records if _value(r, sort.field) is None]
    present.sort(key=lambda r: _value(r, sort.field), reverse=sort.descending)
    return present + missing
