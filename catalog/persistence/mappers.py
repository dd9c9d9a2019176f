"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models, we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from catalog.domain.model import Article, ArticleTag, ArticleTagRow, Tag
from catalog.domain.value import ArticleId, TagId


def _uuid(value: Any) -> UUID:
    """Accept UUIDs stored as strings or native UUIDs."""
    return UUID(value) if isinstance(value, str) else value


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model.

    Args:
        row: Database row as dict

    Returns:
        Tag domain model
    """
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=row["name"],
        name_normalized=row["name_normalized"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict.

    Args:
        tag: Tag domain model

    Returns:
        Dict suitable for database insertion
    """
    return tag.model_dump()


def row_to_article(
    row: Dict[str, Any], tag_rows: Iterable[Dict[str, Any]]
) -> Article:
    """Convert database rows to Article domain model.

    Args:
        row: Article row as dict
        tag_rows: article_tags rows of this article, any order

    Returns:
        Article domain model with tags in position order
    """
    tags = [
        ArticleTag(tag_id=TagId(_uuid(t["tag_id"])), position=t["position"])
        for t in sorted(tag_rows, key=lambda t: t["position"])
    ]
    return Article(
        id=ArticleId(_uuid(row["id"])),
        title=row["title"],
        created_at_utc=row["created_at_utc"],
        updated_at_utc=row.get("updated_at_utc"),
        tags=tags,
    )


def article_to_dict(article: Article) -> Dict[str, Any]:
    """Convert Article domain model to articles table dict.

    Args:
        article: Article domain model

    Returns:
        Dict suitable for database insertion/update (tags excluded)
    """
    return article.model_dump(exclude={"tags"})


def article_tags_to_dicts(article: Article) -> list[Dict[str, Any]]:
    """Convert an article's tag references to article_tags rows.

    Args:
        article: Article domain model

    Returns:
        One dict per tag reference
    """
    return [
        {"article_id": article.id, "position": t.position, "tag_id": t.tag_id}
        for t in article.tags
    ]


def row_to_article_tag_row(row: Dict[str, Any]) -> ArticleTagRow:
    """Convert a joined article/tag row to an ArticleTagRow.

    Args:
        row: Joined row as dict

    Returns:
        ArticleTagRow read record
    """
    return ArticleTagRow(
        article_id=ArticleId(_uuid(row["article_id"])),
        title=row["title"],
        created_at_utc=row["created_at_utc"],
        updated_at_utc=row.get("updated_at_utc"),
        tag_name=row["tag_name"],
        tag_name_normalized=row["tag_name_normalized"],
        position=row["position"],
    )
