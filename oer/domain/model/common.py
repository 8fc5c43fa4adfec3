"""Base model for stored records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable snapshot of a stored record.

    Repositories hand out new instances (``model_copy(update=...)``) instead
    of mutating the one a caller holds.
    """

    model_config = ConfigDict(frozen=True)
