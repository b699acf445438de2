"""
Application Service для управления статьями.
"""

from typing import List, Optional, Union

from src.application.commands.create_article_command import CreateArticleCommand
from src.application.commands.update_article_command import UpdateArticleCommand
from src.application.handlers.article_command_handler import ArticleCommandHandler
from src.domain.entities.article import Article
from src.domain.repositories.article_repository import IArticleRepository
from src.domain.value_objects.article_status import ArticleStatus
from src.domain.value_objects.content_rejected import ContentRejected


class ArticleService:
    """
    Application Service для статей.

    Координирует работу между handlers и repository.
    Команды (create/update/delete) идут через ArticleCommandHandler,
    чтение — напрямую в repository.
    """

    def __init__(
        self,
        repository: IArticleRepository,
        command_handler: ArticleCommandHandler
    ):
        self.repository = repository
        self.command_handler = command_handler

    async def create_article(
        self,
        command: CreateArticleCommand
    ) -> Union[Article, ContentRejected]:
        """Создать статью."""
        return await self.command_handler.handle_create_article(command)

    async def update_article(
        self,
        article_id: int,
        command: UpdateArticleCommand
    ) -> Union[Article, ContentRejected]:
        """Обновить статью."""
        return await self.command_handler.handle_update_article(article_id, command)

    async def delete_article(self, article_id: int) -> Article:
        """Мягко удалить статью."""
        return await self.command_handler.handle_delete_article(article_id)

    async def attach_cover(self, article_id: int, picture_ref: str) -> Article:
        """Прикрепить обложку."""
        return await self.command_handler.handle_attach_cover(article_id, picture_ref)

    async def get_article(self, article_id: int) -> Optional[Article]:
        """Получить статью по ID."""
        return await self.repository.find_by_id(article_id)

    async def list_articles(
        self,
        limit: int = 100,
        offset: int = 0,
        status: Optional[ArticleStatus] = None,
        include_deleted: bool = False
    ) -> List[Article]:
        """Получить список статей."""
        return await self.repository.find_all(
            status=status,
            include_deleted=include_deleted,
            limit=limit,
            offset=offset
        )
