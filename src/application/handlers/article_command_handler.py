"""
Command Handler для статей.
"""

import logging
from typing import Union

from src.application.commands.create_article_command import CreateArticleCommand
from src.application.commands.update_article_command import UpdateArticleCommand
from src.application.services.article_preparer import ArticlePreparer
from src.domain.entities.article import Article
from src.domain.repositories.article_repository import IArticleRepository
from src.domain.value_objects.content_rejected import ContentRejected
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleCommandHandler:
    """Handler для команд работы со статьями."""

    def __init__(self, repository: IArticleRepository, preparer: ArticlePreparer):
        self.repository = repository
        self.preparer = preparer

    async def _get_existing(self, article_id: int) -> Article:
        article = await self.repository.find_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def handle_create_article(
        self,
        command: CreateArticleCommand
    ) -> Union[Article, ContentRejected]:
        """
        Обработка команды создания статьи.

        Args:
            command: Команда создания

        Returns:
            Созданная статья или ContentRejected (ничего не сохранено)
        """
        prepared = self.preparer.prepare_for_create(command)
        if isinstance(prepared, ContentRejected):
            return prepared

        article = await self.repository.save(prepared)
        logger.info(f"[Articles] Created article {article.id} (keywords: {list(article.keywords)})")
        return article

    async def handle_update_article(
        self,
        article_id: int,
        command: UpdateArticleCommand
    ) -> Union[Article, ContentRejected]:
        """
        Обработка команды обновления статьи.

        Raises:
            EntityNotFoundError: Если статья не найдена
        """
        existing = await self._get_existing(article_id)

        prepared = self.preparer.prepare_for_update(existing, command)
        if isinstance(prepared, ContentRejected):
            return prepared

        if prepared != existing:
            await self.repository.update(prepared)
            logger.info(f"[Articles] Updated article {article_id}")
        return prepared

    async def handle_delete_article(self, article_id: int) -> Article:
        """
        Мягкое удаление статьи (status = deleted).

        Raises:
            EntityNotFoundError: Если статья не найдена
        """
        existing = await self._get_existing(article_id)
        deleted = self.preparer.prepare_for_delete(existing)
        await self.repository.update(deleted)
        logger.info(f"[Articles] Soft deleted article {article_id}")
        return deleted

    async def handle_attach_cover(self, article_id: int, picture_ref: str) -> Article:
        """
        Прикрепить сохранённую обложку к статье.

        Raises:
            EntityNotFoundError: Если статья не найдена
        """
        existing = await self._get_existing(article_id)
        updated = existing.with_cover_picture(picture_ref)
        await self.repository.update(updated)
        logger.info(f"[Articles] Attached cover {picture_ref} to article {article_id}")
        return updated
