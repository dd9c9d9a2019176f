"""Catalog aggregation service.

Sections are rebuilt from scratch on every call: all article/tag rows are
loaded in one fetch, regrouped per article, each article's section is
recomputed from its normalized tag names, and articles are grouped by the
resulting section id. Nothing is cached, so results always match the
current article and tag data.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import logfire

from catalog.domain.model.catalog import ArticleTagRow, ArticleView, Section
from catalog.domain.repository.catalog import CatalogRepository
from catalog.domain.section_key import (
    build_section_id,
    build_section_key,
    build_section_name,
)
from catalog.domain.value import EMPTY_SECTION_ID, ArticleId, SectionId

from .base import Service


@dataclass
class CatalogEntry:
    """One article rebuilt from its association rows, with its section."""

    article_id: ArticleId
    title: str
    created_at_utc: datetime
    updated_at_utc: Optional[datetime]
    tag_names: list[str]  # display names, position order
    tag_names_normalized: list[str]  # normalized names, position order
    section_key: str
    section_id: SectionId

    def to_view(self) -> ArticleView:
        """Article view with tags in stored order."""
        return ArticleView(
            id=self.article_id,
            title=self.title,
            created_at_utc=self.created_at_utc,
            updated_at_utc=self.updated_at_utc,
            tags=list(self.tag_names),
        )


def group_rows_by_article(rows: Iterable[ArticleTagRow]) -> list[CatalogEntry]:
    """Rebuild per-article ordered tag lists and compute each section.

    Articles keep the order in which they are first encountered in rows.

    Args:
        rows: Association rows in any order

    Returns:
        One entry per article
    """
    grouped: dict[ArticleId, list[ArticleTagRow]] = {}
    for row in rows:
        grouped.setdefault(row.article_id, []).append(row)

    entries = []
    for article_rows in grouped.values():
        ordered = sorted(article_rows, key=lambda r: r.position)
        first = ordered[0]
        normalized = [r.tag_name_normalized for r in ordered]
        section_key = build_section_key(normalized)

        entries.append(
            CatalogEntry(
                article_id=first.article_id,
                title=first.title,
                created_at_utc=first.created_at_utc,
                updated_at_utc=first.updated_at_utc,
                tag_names=[r.tag_name for r in ordered],
                tag_names_normalized=normalized,
                section_key=section_key,
                section_id=build_section_id(section_key),
            )
        )
    return entries


def build_sections(entries: Iterable[CatalogEntry]) -> list[Section]:
    """Group articles by section and build the sorted section list.

    Display tags come from the first article of each group. All members
    share the same normalized tag set, so they can differ only in casing.

    Args:
        entries: Articles with computed sections

    Returns:
        Sections sorted by article count (desc), then name (asc)
    """
    groups: dict[SectionId, list[CatalogEntry]] = {}
    for entry in entries:
        # Articles without tags belong to no section
        if entry.section_id == EMPTY_SECTION_ID or not entry.tag_names_normalized:
            continue
        groups.setdefault(entry.section_id, []).append(entry)

    sections = []
    for section_id, members in groups.items():
        representative = members[0]
        tags = sorted(set(representative.tag_names))

        sections.append(
            Section(
                id=section_id,
                key=representative.section_key,
                name=build_section_name(tags),
                tags=tags,
                articles_count=len({m.article_id for m in members}),
            )
        )

    sections.sort(key=lambda s: (-s.articles_count, s.name))
    return sections


def select_section_articles(
    entries: Iterable[CatalogEntry], section_id: SectionId
) -> list[ArticleView]:
    """Pick the articles of one section, most recently changed first.

    Args:
        entries: Articles with computed sections
        section_id: Section to select

    Returns:
        Article views sorted by updated_at_utc (or created_at_utc) desc
    """
    if section_id == EMPTY_SECTION_ID:
        return []

    views = [e.to_view() for e in entries if e.section_id == section_id]
    views.sort(key=lambda v: v.sort_time, reverse=True)
    return views


class CatalogService(Service):
    """Domain service for section queries."""

    def __init__(self, catalog_repository: CatalogRepository) -> None:
        """Initialize catalog service.

        Args:
            catalog_repository: Catalog read repository
        """
        self.catalog_repository = catalog_repository

    async def get_sections(self) -> list[Section]:
        """Get all sections currently in use.

        Returns:
            Sections sorted by article count (desc), then name (asc)
        """
        with logfire.span("catalog_service.get_sections"):
            rows = await self.catalog_repository.load_article_tag_rows()
            if not rows:
                logfire.info("No article tags, no sections")
                return []

            entries = group_rows_by_article(rows)
            sections = build_sections(entries)

            logfire.info(
                "Sections built",
                row_count=len(rows),
                article_count=len(entries),
                section_count=len(sections),
            )
            return sections

    async def get_section_articles(self, section_id: SectionId) -> list[ArticleView]:
        """Get the articles of one section.

        Args:
            section_id: Section identifier

        Returns:
            Article views, most recently changed first. Empty when the
            section id is empty or no article maps to it.
        """
        with logfire.span(
            "catalog_service.get_section_articles", section_id=str(section_id)
        ):
            if section_id == EMPTY_SECTION_ID:
                logfire.info("Empty section id, no articles")
                return []

            rows = await self.catalog_repository.load_article_tag_rows()
            if not rows:
                return []

            articles = select_section_articles(
                group_rows_by_article(rows), section_id
            )

            if not articles:
                logfire.warn("No articles in section", section_id=str(section_id))
            else:
                logfire.info(
                    "Section articles listed",
                    section_id=str(section_id),
                    count=len(articles),
                )
            return articles
