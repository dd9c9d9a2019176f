"""Domain services."""

from .article_service import ArticleService
from .base import Service
from .catalog_service import CatalogService
from .tag_service import TagService

__all__ = [
    "ArticleService",
    "CatalogService",
    "Service",
    "TagService",
]
