"""List sections use case."""

import logfire
from pydantic import BaseModel

from catalog.application.usecase.base import BaseUseCase
from catalog.domain.service import CatalogService


class SectionItem(BaseModel):
    """Section item in response."""

    id: str
    name: str
    tags: list[str]
    articles_count: int


class ListSectionsRequest(BaseModel):
    """List sections request (no filters)."""


class ListSectionsResponse(BaseModel):
    """List sections response."""

    sections: list[SectionItem]


class ListSectionsUseCase(BaseUseCase):
    """Use case for listing every section currently in use."""

    def __init__(self, catalog_service: CatalogService) -> None:
        """Initialize list sections use case.

        Args:
            catalog_service: Catalog domain service
        """
        self.catalog_service = catalog_service

    async def execute(self, request: ListSectionsRequest) -> ListSectionsResponse:
        """Execute list sections flow.

        Args:
            request: List sections request

        Returns:
            Sections by article count (desc), then name (asc)
        """
        with logfire.span("list_sections.execute"):
            sections = await self.catalog_service.get_sections()

            items = [
                SectionItem(
                    id=str(section.id),
                    name=section.name,
                    tags=list(section.tags),
                    articles_count=section.articles_count,
                )
                for section in sections
            ]

            logfire.info("Sections listed", count=len(items))
            return ListSectionsResponse(sections=items)
