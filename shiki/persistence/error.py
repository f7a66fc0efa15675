"""Persistence layer errors.

Repositories run every statement inside ``store_errors`` so callers only ever
see the domain's ``StoreError``. Writes that rely on a unique
constraint can opt to receive ``IntegrityError`` unchanged and treat it as
"already exists".
"""

import asyncio
from contextlib import contextmanager
from typing import Iterator

import logfire
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shiki.domain.error import StoreError


@contextmanager
def store_errors(
    operation: str, propagate_integrity: bool = False
) -> Iterator[None]:
    """Translate database failures raised in the block into StoreError.

    Args:
        operation: Name of the repository operation, for logs and the error
        propagate_integrity: Re-raise constraint violations unchanged
    """
    try:
        yield
    except IntegrityError as e:
        if propagate_integrity:
            raise
        logfire.error(
            "Store rejected write", operation=operation, error=str(e.orig)
        )
        raise StoreError(operation, "constraint violation", retryable=False) from e
    except (asyncio.TimeoutError, TimeoutError) as e:
        logfire.error("Store operation timed out", operation=operation)
        raise StoreError(operation, "timeout") from e
    except SQLAlchemyError as e:
        logfire.error(
            "Store operation failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise StoreError(operation, type(e).__name__) from e
    except OSError as e:
        logfire.error(
            "Store connection failed",
            operation=operation,
            error_type=type(e).__name__,
            error=str(e),
        )
        raise StoreError(operation, "connection failed") from e
