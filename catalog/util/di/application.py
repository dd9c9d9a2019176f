"""Application layer DI providers."""

from dishka import Scope, provide

from catalog.application.usecase.article import (
    CreateArticleUseCase,
    DeleteArticleUseCase,
    GetArticleUseCase,
    UpdateArticleUseCase,
)
from catalog.application.usecase.section import (
    ListSectionArticlesUseCase,
    ListSectionsUseCase,
)
from catalog.domain.service import ArticleService, CatalogService
from catalog.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Article use cases
    @provide(scope=Scope.REQUEST)
    def get_create_article_use_case(
        self, article_service: ArticleService
    ) -> CreateArticleUseCase:
        """Provide create article use case."""
        return CreateArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_get_article_use_case(
        self, article_service: ArticleService
    ) -> GetArticleUseCase:
        """Provide get article use case."""
        return GetArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_update_article_use_case(
        self, article_service: ArticleService
    ) -> UpdateArticleUseCase:
        """Provide update article use case."""
        return UpdateArticleUseCase(article_service=article_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_article_use_case(
        self, article_service: ArticleService
    ) -> DeleteArticleUseCase:
        """Provide delete article use case."""
        return DeleteArticleUseCase(article_service=article_service)

    # Section use cases
    @provide(scope=Scope.REQUEST)
    def get_list_sections_use_case(
        self, catalog_service: CatalogService
    ) -> ListSectionsUseCase:
        """Provide list sections use case."""
        return ListSectionsUseCase(catalog_service=catalog_service)

    @provide(scope=Scope.REQUEST)
    def get_list_section_articles_use_case(
        self, catalog_service: CatalogService
    ) -> ListSectionArticlesUseCase:
        """Provide list section articles use case."""
        return ListSectionArticlesUseCase(catalog_service=catalog_service)
