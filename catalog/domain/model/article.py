"""Article aggregate root.

Articles are the cataloged documents. Each article owns an ordered,
deduplicated list of tag references; the set of normalized names behind
those references decides which section the article falls into.
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import Any, Optional

from pydantic import ConfigDict, Field, field_validator, model_validator

from catalog.domain.error import ValidationError
from catalog.domain.model.common import DomainModel
from catalog.domain.section_key import build_section_key
from catalog.domain.value import NIL_UUID, ArticleId, TagId

TITLE_MAX_LENGTH = 256
MAX_DISTINCT_TAGS = 256


def normalize_title(title: Any) -> str:
    """Trim and validate an article title."""
    if title is None or not isinstance(title, str) or not title.strip():
        raise ValidationError("Title cannot be empty")
    trimmed = title.strip()
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Article title cannot be longer than {TITLE_MAX_LENGTH} characters"
        )
    return trimmed


def _distinct_tag_ids(tag_ids_in_order: Iterable[TagId] | None) -> list[TagId]:
    """Validate tag ids and drop duplicates, keeping first occurrences."""
    if tag_ids_in_order is None:
        raise ValidationError("List of tags cannot be None")

    tag_ids = list(tag_ids_in_order)
    if any(tag_id is None or tag_id == NIL_UUID for tag_id in tag_ids):
        raise ValidationError("Tag ids cannot contain an empty id")

    distinct = list(dict.fromkeys(tag_ids))
    if len(distinct) > MAX_DISTINCT_TAGS:
        raise ValidationError(
            f"Articles cannot have more than {MAX_DISTINCT_TAGS} distinct tags"
        )
    return distinct


class ArticleTag(DomainModel):
    """Reference from an article to a tag at a given slot."""

    tag_id: TagId
    position: int

    @field_validator("position")
    @classmethod
    def validate_position(cls, v: int) -> int:
        """Positions are zero-based."""
        if v < 0:
            raise ValidationError("Position must be non-negative")
        return v

    @classmethod
    def create(cls, tag_id: TagId, position: int) -> "ArticleTag":
        """Create an article-tag reference.

        Args:
            tag_id: Referenced tag
            position: Slot of the tag in the article's list

        Returns:
            New article-tag reference

        Raises:
            ValidationError: If position is negative
        """
        return cls(tag_id=tag_id, position=position)


class Article(DomainModel):
    """Article aggregate root.

    Invariants:
    - title is trimmed, 1-256 characters
    - tags are unique by tag_id, at most 256 of them
    - positions are exactly 0..len(tags)-1 in list order

    Updates change the article in place and replace the whole tag list.
    """

    model_config = ConfigDict(frozen=False, arbitrary_types_allowed=True)

    id: ArticleId
    title: str
    created_at_utc: datetime
    updated_at_utc: Optional[datetime] = None
    tags: list[ArticleTag] = Field(default_factory=list)

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v: Any) -> Any:
        """Reject a missing or nil id."""
        if v is None or v == NIL_UUID:
            raise ValidationError("Article id cannot be empty")
        return v

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v: Any) -> str:
        """Trim and validate title."""
        return normalize_title(v)

    @model_validator(mode="after")
    def validate_tag_positions(self) -> "Article":
        """Check tag references are unique and contiguous."""
        if [t.position for t in self.tags] != list(range(len(self.tags))):
            raise ValidationError("Tag positions must be contiguous from 0")
        if len({t.tag_id for t in self.tags}) != len(self.tags):
            raise ValidationError("Tag ids must be unique within an article")
        if len(self.tags) > MAX_DISTINCT_TAGS:
            raise ValidationError(
                f"Articles cannot have more than {MAX_DISTINCT_TAGS} distinct tags"
            )
        return self

    @classmethod
    def create(
        cls,
        id: ArticleId,
        title: str,
        created_at_utc: datetime,
        tag_ids_in_order: Iterable[TagId] | None,
    ) -> "Article":
        """Create a new article.

        Args:
            id: Article identifier (assigned by the caller)
            title: Article title
            created_at_utc: Creation time
            tag_ids_in_order: Tag ids in client order, duplicates allowed

        Returns:
            New article with tags deduplicated and positioned 0..n-1

        Raises:
            ValidationError: If any input is invalid
        """
        distinct = _distinct_tag_ids(tag_ids_in_order)
        return cls(
            id=id,
            title=title,
            created_at_utc=created_at_utc,
            updated_at_utc=None,
            tags=[ArticleTag.create(tag_id, i) for i, tag_id in enumerate(distinct)],
        )

    def update(
        self,
        title: str,
        updated_at_utc: datetime,
        tag_ids_in_order: Iterable[TagId] | None,
    ) -> None:
        """Replace title and tag list.

        Everything is validated before the article is touched. The update
        timestamp is set even when nothing else changes.

        Args:
            title: New title
            updated_at_utc: Update time
            tag_ids_in_order: New tag ids in client order, duplicates allowed

        Raises:
            ValidationError: If any input is invalid
        """
        normalized_title = normalize_title(title)
        distinct = _distinct_tag_ids(tag_ids_in_order)

        self.title = normalized_title
        self.updated_at_utc = updated_at_utc
        self.tags = [ArticleTag.create(tag_id, i) for i, tag_id in enumerate(distinct)]

    @property
    def tag_ids(self) -> list[TagId]:
        """Tag ids in position order."""
        return [t.tag_id for t in self.tags]

    def compute_section_key(self, resolve_tag_name: Callable[[TagId], str]) -> str:
        """Compute this article's section key.

        Args:
            resolve_tag_name: Maps a tag id to its normalized name

        Returns:
            Section key, empty string when the article has no tags

        Raises:
            ValidationError: If resolve_tag_name is None
        """
        if resolve_tag_name is None:
            raise ValidationError("Tag name resolver cannot be None")

        return build_section_key(resolve_tag_name(t.tag_id) for t in self.tags)
