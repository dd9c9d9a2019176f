"""Article repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from catalog.domain.model.article import Article
from catalog.domain.value import ArticleId


class ArticleRepository(ABC):
    """Repository for Article aggregate.

    Defines the contract for article persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, article_id: ArticleId) -> Optional[Article]:
        """Find an article by ID.

        Args:
            article_id: The article's unique identifier

        Returns:
            The article with its tag references if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Save an article (create or update).

        On update the stored tag references are dropped and rebuilt from
        the article's current tag list.

        Args:
            article: The article to save

        Returns:
            The saved article
        """
        pass

    @abstractmethod
    async def delete(self, article_id: ArticleId) -> bool:
        """Delete an article and its tag references.

        Args:
            article_id: The article ID to delete

        Returns:
            True if an article was deleted, False if it did not exist
        """
        pass
