"""PostgreSQL repository implementations."""

from catalog.persistence.repository.article import PostgresArticleRepository
from catalog.persistence.repository.catalog import PostgresCatalogRepository
from catalog.persistence.repository.tag import PostgresTagRepository

__all__ = [
    "PostgresArticleRepository",
    "PostgresCatalogRepository",
    "PostgresTagRepository",
]
