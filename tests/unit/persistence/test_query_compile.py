"""Unit tests for compiling article queries to SQL."""

from datetime import datetime

import pytest
from sqlalchemy.dialects import postgresql

from shiki.domain.value import (
    AllOf,
    AnyOf,
    FieldContains,
    FieldEquals,
    FieldOverlaps,
    FieldRange,
    SortKey,
)
from shiki.persistence.query import compile_order, compile_predicate, escape_like
from shiki.persistence.tables import articles_table


def _compiled(clause):
    return clause.compile(dialect=postgresql.dialect())


def _sql(clause) -> str:
    return str(_compiled(clause))


class TestCompilePredicate:
    """Tests for compile_predicate."""

    def test_equals(self):
        sql = _sql(
            compile_predicate(
                FieldEquals(field="status", value="published"), articles_table
            )
        )
        assert sql.startswith("articles.status = ")

    def test_contains_is_case_insensitive_and_escaped(self):
        compiled = _compiled(
            compile_predicate(
                FieldContains(field="title", term="100%_done"), articles_table
            )
        )
        assert "ILIKE" in str(compiled)
        assert "%100\\%\\_done%" in compiled.params.values()

    def test_overlaps_uses_array_operator(self):
        sql = _sql(
            compile_predicate(
                FieldOverlaps(field="category_tags", values=("react", "vue")),
                articles_table,
            )
        )
        assert "&&" in sql

    def test_range_bounds_inclusive(self):
        sql = _sql(
            compile_predicate(
                FieldRange(
                    field="published_at",
                    gte=datetime(2024, 1, 1),
                    lte=datetime(2024, 1, 31, 23, 59, 59),
                ),
                articles_table,
            )
        )
        assert "articles.published_at >=" in sql
        assert "articles.published_at <=" in sql

    def test_any_of_is_or(self):
        sql = _sql(
            compile_predicate(
                AnyOf(
                    predicates=(
                        FieldContains(field="title", term="x"),
                        FieldContains(field="content", term="x"),
                    )
                ),
                articles_table,
            )
        )
        assert " OR " in sql

    def test_all_of_is_and(self):
        sql = _sql(
            compile_predicate(
                AllOf(
                    predicates=(
                        FieldEquals(field="status", value="published"),
                        FieldOverlaps(field="category_tags", values=("react",)),
                    )
                ),
                articles_table,
            )
        )
        assert " AND " in sql

    def test_unknown_column_rejected(self):
        with pytest.raises(ValueError, match="Unknown column"):
            compile_predicate(FieldEquals(field="nope", value="x"), articles_table)


class TestCompileOrder:
    """Tests for compile_order."""

    def test_descending_nulls_last(self):
        sql = _sql(compile_order(SortKey(field="published_at"), articles_table))
        assert sql == "articles.published_at DESC NULLS LAST"

    def test_ascending_nulls_last(self):
        sql = _sql(
            compile_order(
                SortKey(field="published_at", descending=False), articles_table
            )
        )
        assert sql == "articles.published_at ASC NULLS LAST"


def test_escape_like_backslash():
    assert escape_like("a\\b") == "a\\\\b"
