"""Domain value objects for the catalog."""

from catalog.domain.value.identifiers import (
    EMPTY_SECTION_ID,
    NIL_UUID,
    ArticleId,
    SectionId,
    TagId,
)
from catalog.domain.value.types import TAG_NAME_MAX_LENGTH, TagName

__all__ = [
    # Identifiers
    "ArticleId",
    "TagId",
    "SectionId",
    "NIL_UUID",
    "EMPTY_SECTION_ID",
    # Types
    "TagName",
    "TAG_NAME_MAX_LENGTH",
]
