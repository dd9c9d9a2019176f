"""In-memory catalog read repository for testing."""

from typing import Optional

from catalog.domain.model import ArticleTagRow
from catalog.domain.repository.catalog import CatalogRepository

from .store import InMemoryStore


class InMemoryCatalogRepository(CatalogRepository):
    """Builds association rows from the shared in-memory store."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def load_article_tag_rows(self) -> list[ArticleTagRow]:
        """Load every (article, tag, position) association."""
        rows = []
        for article in self._store.articles.values():
            for article_tag in article.tags:
                tag = self._store.tags[article_tag.tag_id]
                rows.append(
                    ArticleTagRow(
                        article_id=article.id,
                        title=article.title,
                        created_at_utc=article.created_at_utc,
                        updated_at_utc=article.updated_at_utc,
                        tag_name=tag.name,
                        tag_name_normalized=tag.name_normalized,
                        position=article_tag.position,
                    )
                )
        return rows
