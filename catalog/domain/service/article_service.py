"""Article domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from catalog.domain.error import ValidationError
from catalog.domain.model.article import MAX_DISTINCT_TAGS, Article, normalize_title
from catalog.domain.model.catalog import ArticleView
from catalog.domain.model.tag import Tag
from catalog.domain.repository.article import ArticleRepository
from catalog.domain.section_key import build_section_id
from catalog.domain.value import ArticleId, SectionId, TagId, TagName

from .base import Service
from .tag_service import TagService


class ArticleService(Service):
    """Domain service for article create/read/update/delete."""

    def __init__(
        self, article_repository: ArticleRepository, tag_service: TagService
    ) -> None:
        """Initialize article service.

        Args:
            article_repository: Article repository
            tag_service: Tag domain service
        """
        self.article_repository = article_repository
        self.tag_service = tag_service

    async def get_article(self, article_id: ArticleId) -> ArticleView | None:
        """Get an article by ID.

        Args:
            article_id: Article ID

        Returns:
            Article view if found, None otherwise
        """
        with logfire.span("article_service.get_article", article_id=str(article_id)):
            article = await self.article_repository.find_by_id(article_id)

            if article is None:
                logfire.warn("Article not found", article_id=str(article_id))
                return None

            tags = await self.tag_service.get_tags_by_id(article.tag_ids)
            return self._to_view(article, tags)

    async def create_article(self, title: str, tag_names: list[str]) -> ArticleView:
        """Create a new article.

        Tags are resolved (and created when new) before the article is
        built, so the article only ever references stored tags.

        Args:
            title: Article title
            tag_names: Tag names in client order

        Returns:
            View of the created article

        Raises:
            ValidationError: If title or tags are invalid
        """
        with logfire.span(
            "article_service.create_article", title=title, tags=tag_names
        ):
            # Nothing may be stored for a request the aggregate will reject
            self._check_input(title, tag_names)
            tags = await self.tag_service.resolve_tags(tag_names)

            article = Article.create(
                id=ArticleId(uuid4()),
                title=title,
                created_at_utc=datetime.now(timezone.utc),
                tag_ids_in_order=[tag.id for tag in tags],
            )
            saved = await self.article_repository.save(article)

            tags_by_id = {tag.id: tag for tag in tags}
            logfire.info(
                "Article created",
                article_id=str(saved.id),
                tag_count=len(saved.tags),
                section_id=str(self._section_id(saved, tags_by_id)),
            )
            return self._to_view(saved, tags_by_id)

    async def update_article(
        self, article_id: ArticleId, title: str, tag_names: list[str]
    ) -> ArticleView | None:
        """Replace an article's title and tag list.

        Args:
            article_id: Article ID
            title: New title
            tag_names: New tag names in client order

        Returns:
            View of the updated article, None if the article doesn't exist

        Raises:
            ValidationError: If title or tags are invalid
        """
        with logfire.span(
            "article_service.update_article",
            article_id=str(article_id),
            title=title,
            tags=tag_names,
        ):
            article = await self.article_repository.find_by_id(article_id)
            if article is None:
                logfire.warn(
                    "Attempt to update missing article", article_id=str(article_id)
                )
                return None

            # Nothing may be stored for a request the aggregate will reject
            self._check_input(title, tag_names)
            tags = await self.tag_service.resolve_tags(tag_names)

            article.update(
                title=title,
                updated_at_utc=datetime.now(timezone.utc),
                tag_ids_in_order=[tag.id for tag in tags],
            )
            saved = await self.article_repository.save(article)

            tags_by_id = {tag.id: tag for tag in tags}
            logfire.info(
                "Article updated",
                article_id=str(saved.id),
                tag_count=len(saved.tags),
                section_id=str(self._section_id(saved, tags_by_id)),
            )
            return self._to_view(saved, tags_by_id)

    async def delete_article(self, article_id: ArticleId) -> bool:
        """Delete an article.

        Args:
            article_id: Article ID

        Returns:
            True if the article was deleted, False if it didn't exist
        """
        with logfire.span(
            "article_service.delete_article", article_id=str(article_id)
        ):
            deleted = await self.article_repository.delete(article_id)

            if deleted:
                logfire.info("Article deleted", article_id=str(article_id))
            else:
                logfire.warn(
                    "Attempt to delete missing article", article_id=str(article_id)
                )

            return deleted

    @staticmethod
    def _check_input(title: str, tag_names: list[str]) -> None:
        """Validate title and tag names before any tag is created.

        Raises:
            ValidationError: If the title, the tag list or a tag name is invalid,
                or there are too many distinct tags
        """
        normalize_title(title)
        if tag_names is None:
            raise ValidationError("List of tags cannot be None")

        distinct = {TagName(raw) for raw in tag_names}
        if len(distinct) > MAX_DISTINCT_TAGS:
            raise ValidationError(
                f"Articles cannot have more than {MAX_DISTINCT_TAGS} distinct tags"
            )

    @staticmethod
    def _section_id(article: Article, tags_by_id: dict[TagId, Tag]) -> SectionId:
        """Section the article currently falls into."""
        key = article.compute_section_key(
            lambda tag_id: tags_by_id[tag_id].name_normalized
        )
        return build_section_id(key)

    @staticmethod
    def _to_view(article: Article, tags_by_id: dict[TagId, Tag]) -> ArticleView:
        """Build the article view with tag display names in position order."""
        return ArticleView(
            id=article.id,
            title=article.title,
            created_at_utc=article.created_at_utc,
            updated_at_utc=article.updated_at_utc,
            tags=[
                tags_by_id[tag_id].name
                for tag_id in article.tag_ids
                if tag_id in tags_by_id
            ],
        )
