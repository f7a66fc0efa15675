"""Unit tests for row/model mapping."""

from datetime import datetime, timedelta, timezone

from shiki.domain.value import ArticleStatus
from shiki.persistence.mappers import article_to_dict, row_to_article
from tests.conftest import make_article


class TestArticleMapping:
    """Tests for article row conversion."""

    def test_dict_back_to_article(self):
        # Arrange
        article = make_article(category_tags=["react"], like_count=2)

        # Act
        restored = row_to_article(article_to_dict(article))

        # Assert
        assert restored == article

    def test_aware_timestamps_read_as_utc(self):
        """asyncpg returns aware datetimes; the domain works in naive UTC."""
        # Arrange
        row = article_to_dict(make_article())
        row["published_at"] = datetime(
            2024, 1, 15, 21, 0, tzinfo=timezone(timedelta(hours=9))
        )

        # Act
        article = row_to_article(row)

        # Assert
        assert article.published_at == datetime(2024, 1, 15, 12, 0)
        assert article.status == ArticleStatus.PUBLISHED

    def test_null_tags_become_empty(self):
        row = article_to_dict(make_article())
        row["category_tags"] = None

        assert row_to_article(row).category_tags == []
