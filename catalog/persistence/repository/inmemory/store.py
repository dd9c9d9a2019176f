"""Shared in-memory state for the in-memory repositories."""

from catalog.domain.model import Article, Tag
from catalog.domain.value import ArticleId, TagId


class InMemoryStore:
    """Tables of the in-memory catalog.

    One store is shared by the article, tag and catalog repositories so
    that they see each other's writes, like tables of one database.
    """

    def __init__(self) -> None:
        self.articles: dict[ArticleId, Article] = {}
        self.tags: dict[TagId, Tag] = {}
        self.tag_name_index: dict[str, TagId] = {}  # normalized name -> id

    def clear(self) -> None:
        """Drop all data."""
        self.articles.clear()
        self.tags.clear()
        self.tag_name_index.clear()
