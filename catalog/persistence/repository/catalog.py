"""PostgreSQL implementation of the catalog read repository."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.model import ArticleTagRow
from catalog.domain.repository.catalog import CatalogRepository
from catalog.persistence.mappers import row_to_article_tag_row
from catalog.persistence.tables import article_tags_table, articles_table, tags_table


class PostgresCatalogRepository(CatalogRepository):
    """Loads article/tag associations with one joined query."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load_article_tag_rows(self) -> list[ArticleTagRow]:
        """Load every (article, tag, position) association."""
        with logfire.span("catalog_repository.load_article_tag_rows"):
            stmt = (
                select(
                    article_tags_table.c.article_id,
                    articles_table.c.title,
                    articles_table.c.created_at_utc,
                    articles_table.c.updated_at_utc,
                    tags_table.c.name.label("tag_name"),
                    tags_table.c.name_normalized.label("tag_name_normalized"),
                    article_tags_table.c.position,
                )
                .select_from(article_tags_table)
                .join(articles_table, article_tags_table.c.article_id == articles_table.c.id)
                .join(tags_table, article_tags_table.c.tag_id == tags_table.c.id)
            )
            result = await self.session.execute(stmt)
            rows = [row_to_article_tag_row(row._asdict()) for row in result.fetchall()]

            logfire.debug("Article tag rows loaded", count=len(rows))
            return rows
