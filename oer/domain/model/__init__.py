"""Domain model entities for the OER store."""

from oer.domain.model.document import LearningDocument
from oer.domain.model.keyword import Keyword
from oer.domain.model.resource import CountDecrement, Resource

__all__ = [
    "Keyword",
    "Resource",
    "CountDecrement",
    "LearningDocument",
]
