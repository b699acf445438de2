"""
Pydantic schemas для API.

Поля в JSON — camelCase (authorId, publicationDate, coverPictureRef),
на вход принимаются и snake_case имена.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.article import Article, SLUG_MAX_LENGTH, TITLE_MAX_LENGTH
from src.domain.value_objects.article_status import ArticleStatus


class CreateArticleRequest(BaseModel):
    """Запрос на создание статьи."""

    model_config = ConfigDict(populate_by_name=True)

    author_id: int = Field(..., alias="authorId")
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1)
    slug: str = Field(..., min_length=1, max_length=SLUG_MAX_LENGTH)
    publication_date: Optional[datetime] = Field(default=None, alias="publicationDate")
    status: ArticleStatus = ArticleStatus.DRAFT


class UpdateArticleRequest(BaseModel):
    """Запрос на частичное обновление статьи (только переданные поля)."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = Field(default=None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1, max_length=SLUG_MAX_LENGTH)
    publication_date: Optional[datetime] = Field(default=None, alias="publicationDate")
    status: Optional[ArticleStatus] = None


class KeywordsPreviewRequest(BaseModel):
    """Запрос на анализ текста без сохранения."""

    content: str
    limit: int = Field(default=3, ge=1, le=20)


class KeywordsPreviewResponse(BaseModel):
    """Результат анализа текста."""

    model_config = ConfigDict(populate_by_name=True)

    allowed: bool
    banned_words: List[str] = Field(default_factory=list, alias="bannedWords")
    keywords: List[str] = Field(default_factory=list)


class ArticleResponse(BaseModel):
    """Ответ со статьёй."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    author_id: int = Field(..., alias="authorId")
    title: str
    content: str
    slug: str
    publication_date: Optional[datetime] = Field(default=None, alias="publicationDate")
    creation_date: datetime = Field(..., alias="creationDate")
    keywords: List[str]
    status: ArticleStatus
    cover_picture_ref: Optional[str] = Field(default=None, alias="coverPictureRef")

    @classmethod
    def from_entity(cls, entity: Article) -> "ArticleResponse":
        """Создать из entity."""
        return cls(
            id=entity.id,
            author_id=entity.author_id,
            title=entity.title,
            content=entity.content,
            slug=entity.slug,
            publication_date=entity.publication_date,
            creation_date=entity.creation_date,
            keywords=list(entity.keywords),
            status=entity.status,
            cover_picture_ref=entity.cover_picture_ref,
        )


class MessageResponse(BaseModel):
    """Простой ответ с сообщением."""

    message: str
