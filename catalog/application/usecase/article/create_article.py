"""Create article use case."""

import logfire
from pydantic import BaseModel

from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import ArticleService

from .common import ArticleResponse


class CreateArticleRequest(BaseModel):
    """Create article request."""

    title: str
    tags: list[str]  # Client order, duplicates allowed


class CreateArticleUseCase(BaseUseCase):
    """Use case for creating a new article."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize create article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(self, request: CreateArticleRequest) -> ArticleResponse:
        """Execute create article flow.

        Steps:
        1. Resolve tag names to tags, creating unknown ones
        2. Build the Article aggregate (validation happens in the domain model)
        3. Save it

        Args:
            request: Create article request

        Returns:
            Created article with stored tag names

        Raises:
            ValidationError: If the title or a tag name is invalid
        """
        with logfire.span(
            "create_article.execute", title=request.title, tags=request.tags
        ):
            view = await self.article_service.create_article(
                title=request.title, tag_names=request.tags
            )
            return ArticleResponse.from_view(view)
