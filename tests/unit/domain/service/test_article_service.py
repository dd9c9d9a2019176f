"""Unit tests for ArticleService."""

from uuid import uuid4

import pytest

from catalog.domain.error import ValidationError
from catalog.domain.model.article import MAX_DISTINCT_TAGS, TITLE_MAX_LENGTH
from catalog.domain.repository import ArticleRepository, TagRepository
from catalog.domain.section_key import build_section_id
from catalog.domain.service import ArticleService, CatalogService
from catalog.domain.value import ArticleId, TagName
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateArticle:
    """Tests for create_article."""

    @pytest.mark.asyncio
    async def test_create_article_stores_tags_in_order(self, unit_env):
        """Tags keep client order, duplicates (by case) collapse."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        article_repo = await unit_env.get(ArticleRepository)

        # Act
        view = await article_service.create_article(
            "Event sourcing", ["Kafka", "Backend", "kafka"]
        )

        # Assert
        assert view.title == "Event sourcing"
        assert view.tags == ["Kafka", "Backend"]
        assert view.updated_at_utc is None

        stored = await article_repo.find_by_id(view.id)
        assert stored is not None
        assert [t.position for t in stored.tags] == [0, 1]

    @pytest.mark.asyncio
    async def test_create_article_reuses_first_casing(self, unit_env):
        """A tag keeps the casing it was first created with."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        await article_service.create_article("First", ["Backend"])

        # Act
        view = await article_service.create_article("Second", ["BACKEND"])

        # Assert
        assert view.tags == ["Backend"]

    @pytest.mark.asyncio
    async def test_create_article_without_tags(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        catalog_service = await unit_env.get(CatalogService)

        view = await article_service.create_article("Loose", [])

        assert view.tags == []
        assert await catalog_service.get_sections() == []

    @pytest.mark.asyncio
    async def test_create_article_rejects_blank_tag(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(ValidationError):
            await article_service.create_article("Title", ["Backend", "  "])

    @pytest.mark.asyncio
    async def test_create_article_rejects_blank_title(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        with pytest.raises(ValidationError):
            await article_service.create_article("  ", ["Backend"])

    @pytest.mark.asyncio
    async def test_rejected_create_stores_no_tags(self, unit_env):
        """A rejected title must not leave tags behind to claim the display casing."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        tag_repo = await unit_env.get(TagRepository)

        # Act
        with pytest.raises(ValidationError):
            await article_service.create_article("   ", ["BACKEND"])
        view = await article_service.create_article("Real", ["Backend"])

        # Assert
        assert view.tags == ["Backend"]
        stored = await tag_repo.find_by_names([TagName("backend")])
        assert [t.name for t in stored] == ["Backend"]

    @pytest.mark.asyncio
    async def test_too_many_tags_stores_nothing(self, unit_env):
        article_service = await unit_env.get(ArticleService)
        tag_repo = await unit_env.get(TagRepository)
        names = [f"tag-{i}" for i in range(MAX_DISTINCT_TAGS + 1)]

        with pytest.raises(ValidationError):
            await article_service.create_article("Title", names)

        assert await tag_repo.find_by_names([TagName(n) for n in names]) == []


class TestUpdateArticle:
    """Tests for update_article."""

    @pytest.mark.asyncio
    async def test_update_article_moves_section(self, unit_env):
        """Replacing tags moves the article to the new tag set's section."""
        # Arrange
        article_service = await unit_env.get(ArticleService)
        catalog_service = await unit_env.get(CatalogService)
        created = await article_service.create_article("Title", ["Backend"])

        # Act
        updated = await article_service.update_article(
            created.id, "New title", ["Backend", "Kafka"]
        )

        # Assert
        assert updated is not None
        assert updated.title == "New title"
        assert updated.tags == ["Backend", "Kafka"]
        assert updated.updated_at_utc is not None

        sections = await catalog_service.get_sections()
        assert [s.name for s in sections] == ["Backend, Kafka"]
        assert sections[0].id == build_section_id("backend|kafka")

    @pytest.mark.asyncio
    async def test_update_missing_article_returns_none(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        result = await article_service.update_article(
            ArticleId(uuid4()), "Title", ["Backend"]
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_invalid_update_keeps_stored_article(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        created = await article_service.create_article("Title", ["Backend"])

        # Act
        with pytest.raises(ValidationError):
            await article_service.update_article(created.id, "", ["Kafka"])

        # Assert
        stored = await article_service.get_article(created.id)
        assert stored.title == "Title"
        assert stored.tags == ["Backend"]

    @pytest.mark.asyncio
    async def test_rejected_update_stores_no_new_tags(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        tag_repo = await unit_env.get(TagRepository)
        created = await article_service.create_article("Title", ["Backend"])

        # Act
        with pytest.raises(ValidationError):
            await article_service.update_article(
                created.id, "x" * (TITLE_MAX_LENGTH + 1), ["Kafka"]
            )

        # Assert
        assert await tag_repo.find_by_names([TagName("kafka")]) == []


class TestGetAndDeleteArticle:
    """Tests for get_article and delete_article."""

    @pytest.mark.asyncio
    async def test_get_missing_article(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        assert await article_service.get_article(ArticleId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_delete_article(self, unit_env):
        # Arrange
        article_service = await unit_env.get(ArticleService)
        catalog_service = await unit_env.get(CatalogService)
        created = await article_service.create_article("Title", ["Backend"])

        # Act
        deleted = await article_service.delete_article(created.id)

        # Assert
        assert deleted is True
        assert await article_service.get_article(created.id) is None
        assert await catalog_service.get_sections() == []

    @pytest.mark.asyncio
    async def test_delete_missing_article(self, unit_env):
        article_service = await unit_env.get(ArticleService)

        assert await article_service.delete_article(ArticleId(uuid4())) is False
