"""Integration tests for the PostgreSQL repositories.

These tests run against a real database. Tag names carry a random suffix so
runs do not collide with rows left by earlier runs.
"""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from catalog.domain.model import Article
from catalog.domain.repository import (
    ArticleRepository,
    CatalogRepository,
    TagRepository,
)
from catalog.domain.value import ArticleId, TagName
from catalog.persistence.tables import metadata
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def db(integration_env):
    """Request container with the schema in place."""
    engine = await integration_env.get(AsyncEngine)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    return integration_env


def unique(name: str) -> str:
    return f"{name}-{uuid4().hex[:8]}"


def new_article(tag_ids, title: str = "Title") -> Article:
    return Article.create(
        id=ArticleId(uuid4()),
        title=title,
        created_at_utc=datetime.now(timezone.utc),
        tag_ids_in_order=tag_ids,
    )


class TestTagRepositoryIntegration:
    """Integration tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_get_or_create_returns_one_tag_per_input(self, db):
        """Output follows input order, names differing in case share a tag."""
        # Arrange
        tag_repo = await db.get(TagRepository)
        kafka, backend = unique("Kafka"), unique("Backend")
        names = [TagName(kafka), TagName(backend), TagName(kafka.upper())]

        # Act
        tags = await tag_repo.get_or_create(names)

        # Assert
        assert [t.name for t in tags] == [kafka, backend, kafka]
        assert tags[0].id == tags[2].id
        assert tags[0].name_normalized == kafka.lower()

    @pytest.mark.asyncio
    async def test_get_or_create_reuses_existing_rows(self, db):
        # Arrange
        tag_repo = await db.get(TagRepository)
        name = unique("Backend")
        first = await tag_repo.get_or_create([TagName(name)])

        # Act
        second = await tag_repo.get_or_create([TagName(name.upper())])

        # Assert
        assert second[0].id == first[0].id
        assert second[0].name == name

    @pytest.mark.asyncio
    async def test_concurrent_creators_share_one_tag(self, db):
        """Two transactions creating the same name converge on one row."""
        name = unique("Race")
        container = build_test_container(unmock={"persistence"})

        async def create(raw: str):
            async with container() as request_container:
                tag_repo = await request_container.get(TagRepository)
                return await tag_repo.get_or_create([TagName(raw)])

        try:
            first, second = await asyncio.gather(create(name), create(name.upper()))
        finally:
            await container.close()

        assert first[0].id == second[0].id

    @pytest.mark.asyncio
    async def test_find_by_names_ignores_case(self, db):
        tag_repo = await db.get(TagRepository)
        name = unique("Kafka")
        await tag_repo.get_or_create([TagName(name)])

        found = await tag_repo.find_by_names([TagName(name.upper())])

        assert [t.name for t in found] == [name]


class TestArticleRepositoryIntegration:
    """Integration tests for PostgresArticleRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_keeps_positions(self, db):
        # Arrange
        tag_repo = await db.get(TagRepository)
        article_repo = await db.get(ArticleRepository)
        tags = await tag_repo.get_or_create(
            [TagName(unique("Kafka")), TagName(unique("Backend"))]
        )
        article = new_article([t.id for t in tags])

        # Act
        await article_repo.save(article)
        found = await article_repo.find_by_id(article.id)

        # Assert
        assert found is not None
        assert found.title == "Title"
        assert found.tag_ids == [tags[0].id, tags[1].id]
        assert [t.position for t in found.tags] == [0, 1]

    @pytest.mark.asyncio
    async def test_update_replaces_tag_references(self, db):
        """Saving an updated article rewrites its positions from scratch."""
        # Arrange
        tag_repo = await db.get(TagRepository)
        article_repo = await db.get(ArticleRepository)
        a, b, c = await tag_repo.get_or_create(
            [TagName(unique("A")), TagName(unique("B")), TagName(unique("C"))]
        )
        article = new_article([a.id, b.id])
        await article_repo.save(article)

        # Act
        article.update("Renamed", datetime.now(timezone.utc), [c.id, a.id])
        await article_repo.save(article)

        # Assert
        found = await article_repo.find_by_id(article.id)
        assert found.title == "Renamed"
        assert found.updated_at_utc is not None
        assert found.tag_ids == [c.id, a.id]
        assert [t.position for t in found.tags] == [0, 1]

    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_was_removed(self, db):
        article_repo = await db.get(ArticleRepository)
        article = new_article([])
        await article_repo.save(article)

        assert await article_repo.delete(article.id) is True
        assert await article_repo.find_by_id(article.id) is None
        assert await article_repo.delete(article.id) is False


class TestCatalogRepositoryIntegration:
    """Integration tests for PostgresCatalogRepository."""

    @pytest.mark.asyncio
    async def test_one_row_per_article_tag(self, db):
        # Arrange
        tag_repo = await db.get(TagRepository)
        article_repo = await db.get(ArticleRepository)
        catalog_repo = await db.get(CatalogRepository)
        kafka, backend = unique("Kafka"), unique("Backend")
        tags = await tag_repo.get_or_create([TagName(kafka), TagName(backend)])
        article = new_article([t.id for t in tags], title="Joined")
        untagged = new_article([])
        await article_repo.save(article)
        await article_repo.save(untagged)

        # Act
        rows = await catalog_repo.load_article_tag_rows()

        # Assert
        mine = sorted(
            (r for r in rows if r.article_id == article.id), key=lambda r: r.position
        )
        assert [(r.tag_name, r.tag_name_normalized, r.position) for r in mine] == [
            (kafka, kafka.lower(), 0),
            (backend, backend.lower(), 1),
        ]
        assert all(r.title == "Joined" for r in mine)
        assert not any(r.article_id == untagged.id for r in rows)

    @pytest.mark.asyncio
    async def test_deleted_article_leaves_no_rows(self, db):
        tag_repo = await db.get(TagRepository)
        article_repo = await db.get(ArticleRepository)
        catalog_repo = await db.get(CatalogRepository)
        tags = await tag_repo.get_or_create([TagName(unique("Gone"))])
        article = new_article([tags[0].id])
        await article_repo.save(article)

        await article_repo.delete(article.id)

        rows = await catalog_repo.load_article_tag_rows()
        assert not any(r.article_id == article.id for r in rows)
