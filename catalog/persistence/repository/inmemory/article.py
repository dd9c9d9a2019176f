"""In-memory article repository for testing."""

from typing import Optional

from catalog.domain.error import ValidationError
from catalog.domain.model.article import Article
from catalog.domain.repository.article import ArticleRepository
from catalog.domain.value import ArticleId

from .store import InMemoryStore


class InMemoryArticleRepository(ArticleRepository):
    """In-memory implementation of ArticleRepository for testing.

    Articles are mutable aggregates, so copies go in and out of the store.
    """

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store if store is not None else InMemoryStore()

    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID."""
        article = self._store.articles.get(article_id)
        return article.model_copy(deep=True) if article else None

    async def save(self, article: Article) -> Article:
        """Save an article (create or update)."""
        missing = [t.tag_id for t in article.tags if t.tag_id not in self._store.tags]
        if missing:
            # The foreign key rejects these in PostgreSQL
            raise ValidationError(
                f"Article references unknown tag ids: {[str(t) for t in missing]}"
            )

        self._store.articles[article.id] = article.model_copy(deep=True)
        return article

    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article."""
        return self._store.articles.pop(article_id, None) is not None
