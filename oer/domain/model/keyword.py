"""Keyword entity."""

from datetime import UTC, datetime

from pydantic import Field

from oer.domain.model.common import DomainModel
from oer.domain.value import KeywordValue


class Keyword(DomainModel):
    """A deduplicated, case-normalized tag.

    The normalized value is the natural key; there is never more than one
    keyword per value.
    """

    value: KeywordValue
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
