"""Read-side records of the catalog.

None of these are persisted as such: rows come out of the store as a flat
join, views and sections are rebuilt from those rows on every read.
"""

from datetime import datetime
from typing import Optional

from catalog.domain.value import ArticleId, SectionId
from catalog.domain.value.common import ValueObject


class ArticleTagRow(ValueObject):
    """One (article, tag) association as loaded from the store."""

    article_id: ArticleId
    title: str
    created_at_utc: datetime
    updated_at_utc: Optional[datetime] = None
    tag_name: str
    tag_name_normalized: str
    position: int


class ArticleView(ValueObject):
    """Article as returned to callers, tags in stored order."""

    id: ArticleId
    title: str
    created_at_utc: datetime
    updated_at_utc: Optional[datetime] = None
    tags: list[str]

    @property
    def sort_time(self) -> datetime:
        """Last modification time, falling back to creation time."""
        return self.updated_at_utc or self.created_at_utc


class Section(ValueObject):
    """Derived grouping of articles sharing one set of normalized tags."""

    id: SectionId
    key: str
    name: str
    tags: list[str]
    articles_count: int
