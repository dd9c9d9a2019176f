"""Shared article response model."""

from datetime import datetime

from pydantic import BaseModel

from catalog.domain.model import ArticleView


class ArticleResponse(BaseModel):
    """Article as returned by article and section use cases."""

    id: str
    title: str
    created_at_utc: datetime
    updated_at_utc: datetime | None
    tags: list[str]

    @classmethod
    def from_view(cls, view: ArticleView) -> "ArticleResponse":
        """Build the response from a domain article view."""
        return cls(
            id=str(view.id),
            title=view.title,
            created_at_utc=view.created_at_utc,
            updated_at_utc=view.updated_at_utc,
            tags=list(view.tags),
        )
