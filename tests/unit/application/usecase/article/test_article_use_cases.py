"""Unit tests for article use cases."""

from uuid import uuid4

import pydantic
import pytest

from catalog.application.usecase.article import (
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from catalog.domain.error import ValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateArticleUseCase:
    """Tests for CreateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_create_returns_stored_article(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateArticleUseCase)

        # Act
        response = await use_case.execute(
            CreateArticleRequest(title=" Hello ", tags=["Backend", "C#"])
        )

        # Assert
        assert response.title == "Hello"
        assert response.tags == ["Backend", "C#"]
        assert response.updated_at_utc is None

        get_use_case = await unit_env.get(GetArticleUseCase)
        fetched = await get_use_case.execute(GetArticleRequest(article_id=response.id))
        assert fetched == response

    @pytest.mark.asyncio
    async def test_create_with_invalid_tag_raises(self, unit_env):
        use_case = await unit_env.get(CreateArticleUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(CreateArticleRequest(title="Hello", tags=[" "]))

    def test_request_requires_tag_list(self):
        """A missing tag list is a malformed request."""
        with pytest.raises(pydantic.ValidationError):
            CreateArticleRequest(title="Hello", tags=None)


class TestGetArticleUseCase:
    """Tests for GetArticleUseCase."""

    @pytest.mark.asyncio
    async def test_missing_article_returns_none(self, unit_env):
        use_case = await unit_env.get(GetArticleUseCase)

        assert await use_case.execute(GetArticleRequest(article_id=uuid4())) is None


class TestUpdateArticleUseCase:
    """Tests for UpdateArticleUseCase."""

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateArticleUseCase)
        update = await unit_env.get(UpdateArticleUseCase)
        created = await create.execute(
            CreateArticleRequest(title="Hello", tags=["Backend"])
        )

        # Act
        response = await update.execute(
            UpdateArticleRequest(
                article_id=created.id, title="Hello again", tags=["Kafka"]
            )
        )

        # Assert
        assert response is not None
        assert response.id == created.id
        assert response.tags == ["Kafka"]
        assert response.created_at_utc == created.created_at_utc
        assert response.updated_at_utc is not None

    @pytest.mark.asyncio
    async def test_update_missing_article_returns_none(self, unit_env):
        update = await unit_env.get(UpdateArticleUseCase)

        response = await update.execute(
            UpdateArticleRequest(article_id=uuid4(), title="Hello", tags=[])
        )

        assert response is None


class TestDeleteArticleUseCase:
    """Tests for DeleteArticleUseCase."""

    @pytest.mark.asyncio
    async def test_delete_existing_then_missing(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateArticleUseCase)
        delete = await unit_env.get(DeleteArticleUseCase)
        created = await create.execute(
            CreateArticleRequest(title="Hello", tags=["Backend"])
        )

        # Act
        first = await delete.execute(DeleteArticleRequest(article_id=created.id))
        second = await delete.execute(DeleteArticleRequest(article_id=created.id))

        # Assert
        assert first.deleted is True
        assert second.deleted is False
