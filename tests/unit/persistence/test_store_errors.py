"""Unit tests for translating database failures."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from shiki.domain.error import StoreError
from shiki.persistence.error import store_errors


class TestStoreErrors:
    """Tests for store_errors."""

    def test_operational_error_is_retryable(self):
        with pytest.raises(StoreError) as exc_info:
            with store_errors("article.find_page"):
                raise OperationalError("SELECT 1", {}, Exception("gone"))
        assert exc_info.value.operation == "article.find_page"
        assert exc_info.value.retryable is True

    def test_timeout_translated(self):
        with pytest.raises(StoreError) as exc_info:
            with store_errors("article.find_page"):
                raise TimeoutError()
        assert exc_info.value.detail == "timeout"

    def test_integrity_error_not_retryable(self):
        with pytest.raises(StoreError) as exc_info:
            with store_errors("article.save"):
                raise IntegrityError("INSERT", {}, Exception("dup"))
        assert exc_info.value.retryable is False

    def test_integrity_error_propagated_on_request(self):
        with pytest.raises(IntegrityError):
            with store_errors("like.save", propagate_integrity=True):
                raise IntegrityError("INSERT", {}, Exception("dup"))

    def test_other_errors_untouched(self):
        with pytest.raises(KeyError):
            with store_errors("article.find_by_id"):
                raise KeyError("x")
