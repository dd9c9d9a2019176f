"""Domain model entities for the catalog."""

from catalog.domain.model.article import Article, ArticleTag
from catalog.domain.model.catalog import ArticleTagRow, ArticleView, Section
from catalog.domain.model.tag import Tag

__all__ = [
    "Article",
    "ArticleTag",
    "ArticleTagRow",
    "ArticleView",
    "Section",
    "Tag",
]
