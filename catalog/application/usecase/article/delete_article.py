"""Delete article use case."""

from uuid import UUID

from pydantic import BaseModel

from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import ArticleService
from catalog.domain.value import ArticleId


class DeleteArticleRequest(BaseModel):
    """Delete article request."""

    article_id: UUID


class DeleteArticleResponse(BaseModel):
    """Delete article response."""

    deleted: bool


class DeleteArticleUseCase(BaseUseCase):
    """Use case for deleting an article."""

    def __init__(self, article_service: ArticleService) -> None:
        self.article_service = article_service

    async def execute(self, request: DeleteArticleRequest) -> DeleteArticleResponse:
        """Execute delete article flow.

        Tags stay behind; an unused tag simply stops contributing to sections.

        Args:
            request: Delete article request

        Returns:
            Whether an article was deleted
        """
        deleted = await self.article_service.delete_article(
            ArticleId(request.article_id)
        )
        return DeleteArticleResponse(deleted=deleted)
