"""PostgreSQL implementation of Article repository."""

from typing import Optional

import logfire
from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.domain.model import Article
from catalog.domain.repository.article import ArticleRepository
from catalog.domain.value import ArticleId
from catalog.persistence.mappers import (
    article_tags_to_dicts,
    article_to_dict,
    row_to_article,
)
from catalog.persistence.tables import article_tags_table, articles_table


class PostgresArticleRepository(ArticleRepository):
    """PostgreSQL implementation of ArticleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID, with its tag references."""
        with logfire.span("article_repository.find_by_id", article_id=str(article_id)):
            stmt = select(articles_table).where(articles_table.c.id == article_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            tags_stmt = select(article_tags_table).where(
                article_tags_table.c.article_id == article_id
            )
            tags_result = await self.session.execute(tags_stmt)
            tag_rows = [r._asdict() for r in tags_result.fetchall()]

            return row_to_article(row._asdict(), tag_rows)

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        with logfire.span(
            "article_repository.save",
            article_id=str(article.id),
            tag_count=len(article.tags),
        ):
            article_dict = article_to_dict(article)

            exists_stmt = select(articles_table.c.id).where(
                articles_table.c.id == article.id
            )
            existing = (await self.session.execute(exists_stmt)).fetchone()

            if existing:
                stmt = (
                    update(articles_table)
                    .where(articles_table.c.id == article.id)
                    .values(**article_dict)
                )
                await self.session.execute(stmt)

                # Tag references are rebuilt from the aggregate
                await self.session.execute(
                    delete(article_tags_table).where(
                        article_tags_table.c.article_id == article.id
                    )
                )
            else:
                await self.session.execute(insert(articles_table).values(**article_dict))

            tag_dicts = article_tags_to_dicts(article)
            if tag_dicts:
                await self.session.execute(insert(article_tags_table).values(tag_dicts))

            await self.session.flush()
            return article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article. Tag references go with it (ON DELETE CASCADE)."""
        with logfire.span("article_repository.delete", article_id=str(article_id)):
            stmt = delete(articles_table).where(articles_table.c.id == article_id)
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount > 0
