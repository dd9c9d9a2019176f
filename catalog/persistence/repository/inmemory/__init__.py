"""In-memory repository implementations for testing."""

from .article import InMemoryArticleRepository
from .catalog import InMemoryCatalogRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository

__all__ = [
    "InMemoryArticleRepository",
    "InMemoryCatalogRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
]
