"""Tag domain service."""

import logfire

from catalog.domain.error import ValidationError
from catalog.domain.model.tag import Tag
from catalog.domain.repository.tag import TagRepository
from catalog.domain.value import TagId, TagName

from .base import Service


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(self, tag_repository: TagRepository) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
        """
        self.tag_repository = tag_repository

    async def resolve_tags(self, raw_names: list[str]) -> list[Tag]:
        """Find or create the tag behind every raw tag name.

        Args:
            raw_names: Tag names as supplied by the client

        Returns:
            One tag per input name, in input order. Names differing only
            in case map to the same tag.

        Raises:
            ValidationError: If the list is None or a name is blank or too long
        """
        if raw_names is None:
            raise ValidationError("List of tags cannot be None")

        with logfire.span("tag_service.resolve_tags", tags=list(raw_names)):
            names = [TagName(raw) for raw in raw_names]
            if not names:
                return []

            tags = await self.tag_repository.get_or_create(names)
            logfire.info(
                "Tags resolved",
                requested=len(names),
                distinct=len({tag.id for tag in tags}),
            )
            return tags

    async def get_tags_by_id(self, tag_ids: list[TagId]) -> dict[TagId, Tag]:
        """Load tags by ID.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Mapping of tag ID to tag for every tag that exists
        """
        with logfire.span("tag_service.get_tags_by_id", count=len(tag_ids)):
            if not tag_ids:
                return {}

            tags = await self.tag_repository.find_by_ids(tag_ids)
            found = {tag.id: tag for tag in tags}

            missing = set(tag_ids) - found.keys()
            if missing:
                logfire.warn(
                    "Tags not found", tag_ids=[str(tag_id) for tag_id in missing]
                )

            return found
