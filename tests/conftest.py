"""
Общие фикстуры: in-memory репозиторий, хранилище обложек, TestClient.
"""

from datetime import datetime
from itertools import count
from typing import Dict, List, Optional

import pytest

from src.application.handlers.article_command_handler import ArticleCommandHandler
from src.application.services.article_preparer import ArticlePreparer
from src.application.services.article_service import ArticleService
from src.domain.entities.article import Article
from src.domain.repositories.article_repository import IArticleRepository
from src.domain.repositories.picture_storage import IPictureStorage
from src.domain.value_objects.article_status import ArticleStatus
from src.domain.value_objects.banned_words import BannedWords
from src.shared.exceptions.domain_exceptions import EntityNotFoundError

FIXED_NOW = datetime(2024, 9, 8, 12, 0, 0)


class InMemoryArticleRepository(IArticleRepository):
    """Репозиторий статей в словаре (ID — автоинкремент)."""

    def __init__(self):
        self.articles: Dict[int, Article] = {}
        self._ids = count(1)

    async def save(self, article: Article) -> Article:
        saved = article.with_id(next(self._ids))
        self.articles[saved.id] = saved
        return saved

    async def update(self, article: Article) -> None:
        if article.id not in self.articles:
            raise EntityNotFoundError("Article", article.id)
        self.articles[article.id] = article

    async def find_by_id(self, article_id: int) -> Optional[Article]:
        return self.articles.get(article_id)

    async def find_all(
        self,
        status: Optional[ArticleStatus] = None,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0
    ) -> List[Article]:
        result = sorted(self.articles.values(), key=lambda a: a.id)
        if status:
            result = [a for a in result if a.status == status]
        elif not include_deleted:
            result = [a for a in result if not a.is_deleted]
        return result[offset:offset + limit]

    async def count(self, status: Optional[ArticleStatus] = None) -> int:
        return len([a for a in self.articles.values() if status is None or a.status == status])


class InMemoryPictureStorage(IPictureStorage):
    """Хранилище обложек в памяти."""

    def __init__(self):
        self.files: Dict[str, bytes] = {}

    async def store(self, data: bytes, extension: Optional[str] = None) -> str:
        name = f"picture{len(self.files) + 1}"
        if extension:
            name = f"{name}.{extension}"
        self.files[name] = data
        return name

    async def delete(self, name: str) -> bool:
        return self.files.pop(name, None) is not None


@pytest.fixture
def banned_words():
    return BannedWords.of(["banned1", "banned2"])


@pytest.fixture
def preparer(banned_words):
    return ArticlePreparer(banned_words, clock=lambda: FIXED_NOW)


@pytest.fixture
def repository():
    return InMemoryArticleRepository()


@pytest.fixture
def picture_storage():
    return InMemoryPictureStorage()


@pytest.fixture
def command_handler(repository, preparer):
    return ArticleCommandHandler(repository, preparer)


@pytest.fixture
def article_service(repository, command_handler):
    return ArticleService(repository, command_handler)


@pytest.fixture
def client(article_service, preparer, picture_storage):
    """TestClient с подменёнными зависимостями (без БД и диска)."""
    from fastapi.testclient import TestClient

    from src.api.dependencies import (
        get_article_preparer,
        get_article_service,
        get_picture_storage,
    )
    from src.main import app

    app.dependency_overrides[get_article_service] = lambda: article_service
    app.dependency_overrides[get_article_preparer] = lambda: preparer
    app.dependency_overrides[get_picture_storage] = lambda: picture_storage

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_article():
    return Article(
        id=1,
        author_id=1,
        title="Test Blog Article",
        content="word word word other other single",
        slug="test-blog-article",
        creation_date=FIXED_NOW,
        keywords=("word", "other", "single"),
    )
