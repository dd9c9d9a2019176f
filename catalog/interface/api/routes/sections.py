"""Section routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from catalog.application.usecase.article import ArticleResponse
from catalog.application.usecase.section import (
    ListSectionArticlesRequest,
    ListSectionArticlesUseCase,
    ListSectionsRequest,
    ListSectionsUseCase,
    SectionItem,
)

router = APIRouter(
    prefix="/api/sections",
    tags=["sections"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=list[SectionItem],
    summary="List sections",
    description="Sections derived from the distinct tag sets of all articles.",
)
async def list_sections(
    use_case: FromDishka[ListSectionsUseCase],
) -> list[SectionItem]:
    """List every section currently in use.

    Args:
        use_case: List sections use case (injected)

    Returns:
        Sections, largest first
    """
    with logfire.span("api.list_sections"):
        result = await use_case.execute(ListSectionsRequest())
        return result.sections


@router.get(
    "/{section_id}/articles",
    response_model=list[ArticleResponse],
    summary="List articles of a section",
)
async def list_section_articles(
    section_id: UUID,
    use_case: FromDishka[ListSectionArticlesUseCase],
) -> list[ArticleResponse]:
    """List the articles of one section.

    Args:
        section_id: Section UUID
        use_case: List section articles use case (injected)

    Returns:
        Articles, most recently changed first. Empty for unknown sections.

    Example:
        GET /api/sections/3f2c.../articles
    """
    with logfire.span("api.list_section_articles", section_id=str(section_id)):
        result = await use_case.execute(
            ListSectionArticlesRequest(section_id=section_id)
        )
        return result.articles
