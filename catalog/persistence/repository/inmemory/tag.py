"""In-memory implementation of Tag repository for testing."""

from copy import deepcopy
from typing import Optional
from uuid import uuid4

from catalog.domain.model.tag import Tag
from catalog.domain.repository.tag import TagRepository
from catalog.domain.value import TagId, TagName

from .store import InMemoryStore


class InMemoryTagRepository(TagRepository):
    """In-memory implementation of TagRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        """Initialize repository.

        Args:
            store: Shared store, a private one is created when omitted
        """
        self._store = store if store is not None else InMemoryStore()

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID."""
        return [
            deepcopy(self._store.tags[tag_id])
            for tag_id in dict.fromkeys(tag_ids)
            if tag_id in self._store.tags
        ]

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by normalized name."""
        tags = []
        for normalized in dict.fromkeys(name.normalized for name in names):
            tag_id = self._store.tag_name_index.get(normalized)
            if tag_id:
                tags.append(deepcopy(self._store.tags[tag_id]))
        return tags

    async def get_or_create(self, names: list[TagName]) -> list[Tag]:
        """Return the tag for every name, creating missing ones."""
        result = []
        for name in names:
            tag_id = self._store.tag_name_index.get(name.normalized)
            if tag_id is None:
                tag = Tag.create(id=TagId(uuid4()), name=name)
                self._store.tags[tag.id] = tag
                self._store.tag_name_index[tag.name_normalized] = tag.id
                tag_id = tag.id
            result.append(deepcopy(self._store.tags[tag_id]))
        return result
