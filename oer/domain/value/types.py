"""Domain value objects for the OER store.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation and normalization rules.
"""

from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator


class KeywordValue(RootModel[str]):
    """Normalized keyword text, immutable and hashable.

    Surrounding whitespace is stripped and the text lower-cased, so
    'Machine Learning ' and 'machine learning' are the same keyword.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Trim and lower-case the raw value."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_keyword(cls, v: str) -> str:
        """Validate keyword is not blank and within length limits."""
        if len(v) < 1:
            raise ValueError("Keyword must not be blank")
        if len(v) > 255:
            raise ValueError("Keyword must be at most 255 characters")
        return v


class DecrementOutcome(str, Enum):
    """Result of lowering a resource count by one."""

    UPDATED = "updated"  # Count lowered, record kept
    REMOVED = "removed"  # Count exhausted, record deleted


class DocumentKind(str, Enum):
    """Kind of free-form learning document."""

    LEARNING_SCENARIO = "learning_scenario"
    LEARNING_PATH = "learning_path"

    @property
    def label(self) -> str:
        """Human readable name used in messages."""
        return self.value.replace("_", " ").capitalize()
