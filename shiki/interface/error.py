"""Interface layer error handling.

Domain errors are translated to HTTP responses in one place so routes only
deal with the happy path.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shiki.domain.error import NotFoundError, StoreError, ValidationError

STORE_UNAVAILABLE_DETAIL = "The service is temporarily unavailable. Please try again."


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    """Missing or invalid input: 422 with the offending field."""
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "field": exc.field},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    """Unknown resource: 404."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": f"{exc.resource} not found"},
    )


async def handle_store_error(request: Request, exc: StoreError) -> JSONResponse:
    """Backing store failure: 503 with a generic message.

    Details are logged, never returned.
    """
    logfire.error(
        "Request failed on store error",
        path=request.url.path,
        operation=exc.operation,
        detail=exc.detail,
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": STORE_UNAVAILABLE_DETAIL},
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Malformed identifiers and other bad values: 400."""
    logfire.warn("Bad request value", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install the domain error handlers on ``app``."""
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(StoreError, handle_store_error)
    app.add_exception_handler(ValueError, handle_value_error)
