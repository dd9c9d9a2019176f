"""PostgreSQL implementation of Tag repository."""

from uuid import uuid4

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.model.tag import Tag
from catalog.domain.repository.tag import TagRepository
from catalog.domain.value import TagId, TagName
from catalog.persistence.mappers import row_to_tag, tag_to_dict
from catalog.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find multiple tags by ID in a single query."""
        if not tag_ids:
            return []

        stmt = select(tags_table).where(tags_table.c.id.in_(tag_ids))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by normalized name in a single query."""
        if not names:
            return []

        normalized = list({name.normalized for name in names})
        stmt = select(tags_table).where(tags_table.c.name_normalized.in_(normalized))
        result = await self.session.execute(stmt)
        return [row_to_tag(row._asdict()) for row in result.fetchall()]

    async def get_or_create(self, names: list[TagName]) -> list[Tag]:
        """Return the tag for every name, creating missing ones.

        Missing names are inserted with ON CONFLICT DO NOTHING on the unique
        normalized name, then everything is re-read. A concurrent writer that
        wins the race simply provides the row we read back.
        """
        if not names:
            return []

        with logfire.span("tag_repository.get_or_create", count=len(names)):
            # First occurrence decides the stored casing
            distinct: dict[str, TagName] = {}
            for name in names:
                distinct.setdefault(name.normalized, name)

            existing = {tag.name_normalized for tag in await self.find_by_names(names)}
            new_tags = [
                Tag.create(id=TagId(uuid4()), name=name)
                for normalized, name in distinct.items()
                if normalized not in existing
            ]

            if new_tags:
                stmt = (
                    insert(tags_table)
                    .values([tag_to_dict(tag) for tag in new_tags])
                    .on_conflict_do_nothing(index_elements=["name_normalized"])
                )
                await self.session.execute(stmt)
                await self.session.flush()
                logfire.info("Tags inserted", count=len(new_tags))

            by_normalized = {
                tag.name_normalized: tag for tag in await self.find_by_names(names)
            }
            return [by_normalized[name.normalized] for name in names]
