"""Article routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel

from catalog.application.usecase.article import (
    ArticleResponse,
    CreateArticleRequest,
    CreateArticleUseCase,
    DeleteArticleRequest,
    DeleteArticleUseCase,
    GetArticleRequest,
    GetArticleUseCase,
    UpdateArticleRequest,
    UpdateArticleUseCase,
)
from catalog.domain.error import DomainError

router = APIRouter(prefix="/api/articles", tags=["articles"], route_class=DishkaRoute)


class ArticleAPIRequest(BaseModel):
    """API request body for creating or replacing an article.

    Length and blank checks are domain rules, reported as 400.
    """

    title: str
    tags: list[str]


def _not_found(article_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Article {article_id} not found",
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: UUID,
    get_article_use_case: FromDishka[GetArticleUseCase],
) -> ArticleResponse:
    """Get an article by ID.

    Args:
        article_id: Article UUID
        get_article_use_case: Get article use case from DI

    Returns:
        Article details

    Raises:
        HTTPException: If the article doesn't exist
    """
    result = await get_article_use_case.execute(
        GetArticleRequest(article_id=article_id)
    )
    if result is None:
        raise _not_found(article_id)
    return result


@router.post(
    "", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED
)
async def create_article(
    request: ArticleAPIRequest,
    create_article_use_case: FromDishka[CreateArticleUseCase],
) -> ArticleResponse:
    """Create a new article.

    Args:
        request: Article title and tag names
        create_article_use_case: Create article use case from DI

    Returns:
        Created article details

    Raises:
        HTTPException: If validation fails
    """
    try:
        return await create_article_use_case.execute(
            CreateArticleRequest(title=request.title, tags=request.tags)
        )
    except DomainError as e:
        logfire.warn("Article creation domain error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Article creation validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error creating article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create article",
        )


@router.put("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_article(
    article_id: UUID,
    request: ArticleAPIRequest,
    update_article_use_case: FromDishka[UpdateArticleUseCase],
) -> Response:
    """Replace an article's title and tags.

    Args:
        article_id: Article UUID
        request: New title and tag names
        update_article_use_case: Update article use case from DI

    Returns:
        Empty 204 response

    Raises:
        HTTPException: If the article doesn't exist or validation fails
    """
    try:
        result = await update_article_use_case.execute(
            UpdateArticleRequest(
                article_id=article_id, title=request.title, tags=request.tags
            )
        )
    except DomainError as e:
        logfire.warn("Article update domain error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except ValueError as e:
        logfire.warn("Article update validation error", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logfire.error("Unexpected error updating article", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update article",
        )

    if result is None:
        raise _not_found(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: UUID,
    delete_article_use_case: FromDishka[DeleteArticleUseCase],
) -> Response:
    """Delete an article.

    Args:
        article_id: Article UUID
        delete_article_use_case: Delete article use case from DI

    Returns:
        Empty 204 response

    Raises:
        HTTPException: If the article doesn't exist
    """
    result = await delete_article_use_case.execute(
        DeleteArticleRequest(article_id=article_id)
    )
    if not result.deleted:
        raise _not_found(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
