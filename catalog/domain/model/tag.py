"""Tag entity."""

from typing import Any

from pydantic import field_validator

from catalog.domain.error import ValidationError
from catalog.domain.model.common import DomainModel
from catalog.domain.value import NIL_UUID, TagId, TagName


class Tag(DomainModel):
    """Tag entity.

    Created lazily the first time a normalized name is seen and never
    changed afterwards. ``name`` keeps the casing of that first occurrence,
    ``name_normalized`` is unique across all tags.
    """

    id: TagId
    name: str
    name_normalized: str

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Any:
        """Reject a missing or nil id."""
        if v is None or v == NIL_UUID:
            raise ValidationError("Tag id cannot be empty")
        return v

    @classmethod
    def create(cls, id: TagId, name: TagName) -> "Tag":
        """Create a new tag from a validated tag name.

        Args:
            id: Tag identifier
            name: Validated tag name

        Returns:
            New tag
        """
        return cls(id=id, name=name.value, name_normalized=name.normalized)
