"""Domain layer DI providers."""

from dishka import Scope, provide

from catalog.domain.repository import (
    ArticleRepository,
    CatalogRepository,
    TagRepository,
)
from catalog.domain.service import ArticleService, CatalogService, TagService
from catalog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_article_service(
        self, article_repository: ArticleRepository, tag_service: TagService
    ) -> ArticleService:
        """Provide article domain service."""
        return ArticleService(
            article_repository=article_repository, tag_service=tag_service
        )

    @provide
    def get_catalog_service(
        self, catalog_repository: CatalogRepository
    ) -> CatalogService:
        """Provide catalog domain service."""
        return CatalogService(catalog_repository=catalog_repository)
