"""Strongly typed identifiers for OER store records.

Resources are keyed by the id their publisher supplies, documents by a
server generated UUID.
"""

from typing import NewType
from uuid import UUID

ResourceId = NewType("ResourceId", str)
DocumentId = NewType("DocumentId", UUID)
