"""Strongly typed identifiers for catalog entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

ArticleId = NewType("ArticleId", UUID)
TagId = NewType("TagId", UUID)

# Content-addressed: derived from the section key, never stored
SectionId = NewType("SectionId", UUID)

NIL_UUID = UUID(int=0)
EMPTY_SECTION_ID = SectionId(NIL_UUID)
