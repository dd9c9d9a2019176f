"""List section articles use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from catalog.application.usecase.article.common import ArticleResponse
from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import CatalogService
from catalog.domain.value import SectionId


class ListSectionArticlesRequest(BaseModel):
    """List section articles request."""

    section_id: UUID


class ListSectionArticlesResponse(BaseModel):
    """List section articles response."""

    articles: list[ArticleResponse]


class ListSectionArticlesUseCase(BaseUseCase):
    """Use case for listing the articles of one section."""

    def __init__(self, catalog_service: CatalogService) -> None:
        self.catalog_service = catalog_service

    async def execute(
        self, request: ListSectionArticlesRequest
    ) -> ListSectionArticlesResponse:
        """Execute list section articles flow.

        An unknown section is not an error, it just has no articles.

        Args:
            request: List section articles request

        Returns:
            Articles, most recently changed first
        """
        with logfire.span(
            "list_section_articles.execute", section_id=str(request.section_id)
        ):
            views = await self.catalog_service.get_section_articles(
                SectionId(request.section_id)
            )
            return ListSectionArticlesResponse(
                articles=[ArticleResponse.from_view(view) for view in views]
            )
