"""Get article use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import ArticleService
from catalog.domain.value import ArticleId

from .common import ArticleResponse


class GetArticleRequest(BaseModel):
    """Get article request."""

    article_id: UUID


class GetArticleUseCase(BaseUseCase):
    """Use case for retrieving an article by ID."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: GetArticleRequest) -> Optional[ArticleResponse]:
        """Execute get article flow.

        Args:
            request: Get article request

        Returns:
            Article details if found, None otherwise
        """
        view = await self.article_service.get_article(ArticleId(request.article_id))
        return ArticleResponse.from_view(view) if view else None
