"""Catalog read repository interface."""

from abc import ABC, abstractmethod

from catalog.domain.model.catalog import ArticleTagRow


class CatalogRepository(ABC):
    """Read-only access to article/tag associations for section queries."""

    @abstractmethod
    async def load_article_tag_rows(self) -> list[ArticleTagRow]:
        """Load every (article, tag, position) association.

        Articles without tags produce no rows. No ordering is guaranteed.

        Returns:
            Flat list of association rows
        """
        pass
