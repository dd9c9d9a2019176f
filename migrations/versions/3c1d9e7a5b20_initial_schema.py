"""initial_schema

Create the catalog schema:
- Tags (unique by normalized name, first-seen casing kept for display)
- Articles
- Article tags (ordered tag references, one row per position)

Revision ID: 3c1d9e7a5b20
Revises:
Create Date: 2026-10-17 10:12:41.512930

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1d9e7a5b20"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(256), nullable=False),
        sa.Column("name_normalized", sa.String(256), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name_normalized", name="uq_tags_name_normalized"),
    )

    # ========================================================================
    # ARTICLES table
    # ========================================================================
    op.create_table(
        "articles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("created_at_utc", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("updated_at_utc", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ARTICLE_TAGS table (ordered tag references)
    # ========================================================================
    op.create_table(
        "article_tags",
        sa.Column("article_id", sa.UUID(), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["article_id"], ["articles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("article_id", "position", name="pk_article_tags"),
        sa.UniqueConstraint(
            "article_id", "tag_id", name="uq_article_tags_article_tag"
        ),
        sa.CheckConstraint(
            "position >= 0", name="article_tags_position_non_negative"
        ),
    )
    op.create_index("idx_article_tags_tag_id", "article_tags", ["tag_id"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index("idx_article_tags_tag_id", table_name="article_tags")
    op.drop_table("article_tags")
    op.drop_table("articles")
    op.drop_table("tags")
