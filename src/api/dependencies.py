"""
FastAPI Dependencies для DI.
"""

from pathlib import Path

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.handlers.article_command_handler import ArticleCommandHandler
from src.application.services.article_preparer import ArticlePreparer
from src.application.services.article_service import ArticleService
from src.domain.repositories.article_repository import IArticleRepository
from src.domain.repositories.picture_storage import IPictureStorage
from src.domain.value_objects.banned_words import BannedWords
from src.infrastructure.config.banned_words import get_banned_words
from src.infrastructure.config.database import get_db_session
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.persistence.article_repository_impl import ArticleRepositoryImpl
from src.infrastructure.storage.local_picture_storage import LocalPictureStorage


async def get_article_repository(
    session: AsyncSession = Depends(get_db_session)
) -> IArticleRepository:
    """DI для repository."""
    return ArticleRepositoryImpl(session)


def get_article_preparer(
    settings: Settings = Depends(get_settings),
    banned_words: BannedWords = Depends(get_banned_words)
) -> ArticlePreparer:
    """DI для подготовки статей (banned words + лимит ключевых слов)."""
    return ArticlePreparer(banned_words, keyword_limit=settings.keyword_limit)


async def get_article_service(
    repository: IArticleRepository = Depends(get_article_repository),
    preparer: ArticlePreparer = Depends(get_article_preparer)
) -> ArticleService:
    """DI для service."""
    command_handler = ArticleCommandHandler(repository, preparer)
    return ArticleService(repository, command_handler)


def get_picture_storage(settings: Settings = Depends(get_settings)) -> IPictureStorage:
    """DI для хранилища обложек."""
    return LocalPictureStorage(Path(settings.upload_dir))
