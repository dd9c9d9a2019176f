"""Domain value objects for the catalog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from typing import Any

from pydantic import field_validator

from catalog.domain.error import ValidationError
from catalog.domain.value.common import RootValueObject

TAG_NAME_MAX_LENGTH = 256


class TagName(RootValueObject[str]):
    """Tag name as typed by a client.

    The display form keeps the original casing (trimmed). Equality and
    hashing use the normalized form only, so 'Backend' == 'backend'.
    Examples: 'Backend', 'C#', 'Kafka'
    """

    @field_validator("root", mode="before")
    @classmethod
    def validate_tag_name(cls, v: Any) -> str:
        """Trim and validate tag name."""
        if v is None or not isinstance(v, str) or not v.strip():
            raise ValidationError("Tag name cannot be empty or whitespace")
        trimmed = v.strip()
        # Lowercasing can grow a name ("İ" becomes two code points)
        if max(len(trimmed), len(trimmed.lower())) > TAG_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Tag name cannot be longer than {TAG_NAME_MAX_LENGTH} characters"
            )
        return trimmed

    @property
    def value(self) -> str:
        """Original (trimmed) display form."""
        return self.root

    @property
    def normalized(self) -> str:
        """Locale-invariant lowercase form used for equality and grouping."""
        return self.root.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TagName):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)
