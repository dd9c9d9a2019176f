"""Article use cases."""

from .common import ArticleResponse
from .create_article import CreateArticleRequest, CreateArticleUseCase
from .delete_article import (
    DeleteArticleRequest,
    DeleteArticleResponse,
    DeleteArticleUseCase,
)
from .get_article import GetArticleRequest, GetArticleUseCase
from .update_article import UpdateArticleRequest, UpdateArticleUseCase

__all__ = [
    "ArticleResponse",
    "CreateArticleRequest",
    "CreateArticleUseCase",
    "DeleteArticleRequest",
    "DeleteArticleResponse",
    "DeleteArticleUseCase",
    "GetArticleRequest",
    "GetArticleUseCase",
    "UpdateArticleRequest",
    "UpdateArticleUseCase",
]
