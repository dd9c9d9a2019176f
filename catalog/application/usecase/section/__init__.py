"""Section use cases."""

from .list_section_articles import (
    ListSectionArticlesRequest,
    ListSectionArticlesResponse,
    ListSectionArticlesUseCase,
)
from .list_sections import (
    ListSectionsRequest,
    ListSectionsResponse,
    ListSectionsUseCase,
    SectionItem,
)

__all__ = [
    "ListSectionArticlesRequest",
    "ListSectionArticlesResponse",
    "ListSectionArticlesUseCase",
    "ListSectionsRequest",
    "ListSectionsResponse",
    "ListSectionsUseCase",
    "SectionItem",
]
