"""Tag repository interface."""

from abc import ABC, abstractmethod

from catalog.domain.model.tag import Tag
from catalog.domain.value import TagId, TagName


class TagRepository(ABC):
    """Repository interface for Tag entities."""

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query.

        Args:
            tag_ids: Tag identifiers

        Returns:
            Found tags (may be fewer than requested, order not guaranteed)
        """
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by normalized name in a single query.

        Args:
            names: Tag names

        Returns:
            Found tags (may be fewer than requested, order not guaranteed)
        """
        pass

    @abstractmethod
    async def get_or_create(self, names: list[TagName]) -> list[Tag]:
        """Return the tag for every name, creating missing ones.

        Names that differ only in case resolve to the same tag. Must be safe
        under concurrent writers: two callers creating the same new name
        end up with one tag record.

        Args:
            names: Tag names

        Returns:
            One tag per input name, in input order
        """
        pass
