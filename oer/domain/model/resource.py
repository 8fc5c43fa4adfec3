"""Resource (OER) entity."""

from datetime import UTC, datetime

from pydantic import Field

from oer.domain.model.common import DomainModel
from oer.domain.value import DecrementOutcome, ResourceId


class Resource(DomainModel):
    """An open educational resource tracked by usage count and likes.

    Keyed by the externally supplied id. Saving the same id again bumps
    ``count`` instead of creating a second record, and the record is removed
    once ``count`` is decremented to zero.
    """

    id: ResourceId
    title: str = Field(min_length=1)
    description: str | None = None
    count: int = Field(default=1, ge=0)
    likes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class CountDecrement(DomainModel):
    """Outcome of decrementing a resource count."""

    resource_id: ResourceId
    outcome: DecrementOutcome
    count: int = Field(ge=0)  # Remaining count, 0 when removed
