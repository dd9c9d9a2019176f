"""Update article use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import ArticleService
from catalog.domain.value import ArticleId

from .common import ArticleResponse


class UpdateArticleRequest(BaseModel):
    """Update article request. Title and tag list are replaced as a whole."""

    article_id: UUID
    title: str
    tags: list[str]


class UpdateArticleUseCase(BaseUseCase):
    """Use case for replacing an article's title and tags."""

    def __init__(self, article_service: ArticleService) -> None:
        """Initialize update article use case.

        Args:
            article_service: Article domain service
        """
        self.article_service = article_service

    async def execute(
        self, request: UpdateArticleRequest
    ) -> Optional[ArticleResponse]:
        """Execute update article flow.

        Args:
            request: Update article request

        Returns:
            Updated article, None if it doesn't exist

        Raises:
            ValidationError: If the title or a tag name is invalid
        """
        with logfire.span(
            "update_article.execute",
            article_id=str(request.article_id),
            tags=request.tags,
        ):
            view = await self.article_service.update_article(
                article_id=ArticleId(request.article_id),
                title=request.title,
                tag_names=request.tags,
            )
            return ArticleResponse.from_view(view) if view else None
