"""Test configuration and fixtures."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from catalog.domain.model.catalog import ArticleTagRow
from catalog.domain.value import ArticleId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_row(
    article_id: ArticleId,
    tag_name: str,
    position: int,
    title: str = "Article",
    created_at_utc: datetime | None = None,
    updated_at_utc: datetime | None = None,
) -> ArticleTagRow:
    """Build an association row as the catalog repository would return it."""
    return ArticleTagRow(
        article_id=article_id,
        title=title,
        created_at_utc=created_at_utc or datetime(2024, 1, 1, tzinfo=timezone.utc),
        updated_at_utc=updated_at_utc,
        tag_name=tag_name,
        tag_name_normalized=tag_name.lower(),
        position=position,
    )


def new_article_id() -> ArticleId:
    """Fresh random article id."""
    return ArticleId(uuid4())
