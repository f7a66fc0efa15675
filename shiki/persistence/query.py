"""Compile store-neutral article queries to SQLAlchemy Core."""

from sqlalchemy import Table, and_, false, or_, true
from sqlalchemy.sql.elements import ColumnElement
from sqlalchemy.sql.expression import UnaryExpression

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


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def compile_predicate(predicate: Predicate, table: Table) -> ColumnElement[bool]:
    """Build a WHERE clause for ``predicate`` against ``table``.

    Raises:
        ValueError: If the predicate names a column the table does not have
    """
    if isinstance(predicate, AllOf):
        if not predicate.predicates:
            return true()
        return and_(*(compile_predicate(p, table) for p in predicate.predicates))
    if isinstance(predicate, AnyOf):
        if not predicate.predicates:
            return false()
        return or_(*(compile_predicate(p, table) for p in predicate.predicates))

    if predicate.field not in table.c:
        raise ValueError(f"Unknown column {predicate.field!r} on {table.name}")
    column = table.c[predicate.field]

    if isinstance(predicate, FieldEquals):
        return column == predicate.value
    if isinstance(predicate, FieldContains):
        return column.ilike(f"%{escape_like(predicate.term)}%", escape="\\")
    if isinstance(predicate, FieldOverlaps):
        return column.overlap(list(predicate.values))
    if isinstance(predicate, FieldRange):
        bounds = []
        if predicate.gte is not None:
            bounds.append(column >= predicate.gte)
        if predicate.lte is not None:
            bounds.append(column <= predicate.lte)
        return and_(*bounds) if bounds else true()
    raise ValueError(f"Unsupported predicate: {predicate!r}")


def compile_order(sort: SortKey, table: Table) -> UnaryExpression:
    """Build the ORDER BY expression for ``sort``.

    NULLs sort last in both directions so unpublished timestamps never lead.
    """
    if sort.field not in table.c:
        raise ValueError(f"Unknown column {sort.field!r} on {table.name}")
    column = table.c[sort.field]
    ordered = column.desc() if sort.descending else column.asc()
    return ordered.nulls_last()
