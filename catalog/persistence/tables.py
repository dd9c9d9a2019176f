"""SQLAlchemy table definitions for the catalog.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(256), nullable=False),  # Casing of first occurrence
    Column("name_normalized", String(256), nullable=False),
    UniqueConstraint("name_normalized", name="uq_tags_name_normalized"),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(256), nullable=False),
    Column("created_at_utc", TIMESTAMP(timezone=True), nullable=False),
    Column("updated_at_utc", TIMESTAMP(timezone=True), nullable=True),
)

# ============================================================================
# ARTICLE_TAGS TABLE (ordered tag references owned by an article)
# ============================================================================
article_tags_table = Table(
    "article_tags",
    metadata,
    Column(
        "article_id",
        UUID(as_uuid=True),
        ForeignKey("articles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),
    Column(
        "tag_id",
        UUID(as_uuid=True),
        ForeignKey("tags.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    PrimaryKeyConstraint("article_id", "position", name="pk_article_tags"),
    UniqueConstraint("article_id", "tag_id", name="uq_article_tags_article_tag"),
    CheckConstraint("position >= 0", name="article_tags_position_non_negative"),
)

Index("idx_article_tags_tag_id", article_tags_table.c.tag_id)
