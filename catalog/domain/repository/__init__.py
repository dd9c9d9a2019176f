"""Repository interfaces for the catalog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from catalog.domain.repository.article import ArticleRepository
from catalog.domain.repository.catalog import CatalogRepository
from catalog.domain.repository.tag import TagRepository

__all__ = [
    "ArticleRepository",
    "CatalogRepository",
    "TagRepository",
]
