"""Learning document entity."""

from datetime import UTC, datetime
from typing import Any

from pydantic import Field

from oer.domain.model.common import DomainModel
from oer.domain.value import DocumentId, DocumentKind


class LearningDocument(DomainModel):
    """Free-form learning scenario or learning path.

    The content (nodes, edges, lesson plans, ...) is stored and returned as
    given, without server-side validation.
    """

    id: DocumentId
    kind: DocumentKind
    content: dict[str, Any]
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
