"""Base model for all domain entities."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen; state changes go through ``model_copy(update=...)``
    and are persisted by a repository.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


def utc_now() -> datetime:
    """Current time as naive UTC, the form every stored timestamp takes."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
