# -*- coding: utf-8 -*-
"""
Доменная сущность: Статья блога (Article)

Статья — неизменяемое значение (frozen dataclass). Любое изменение
(правка, мягкое удаление, прикрепление обложки) создаёт новый экземпляр
через dataclasses.replace, исходный объект не меняется.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Optional, Tuple

from src.domain.value_objects.article_status import ArticleStatus
from src.shared.exceptions.domain_exceptions import DomainValidationError

TITLE_MAX_LENGTH = 100
SLUG_MAX_LENGTH = 255
COVER_REF_MAX_LENGTH = 255
MAX_KEYWORDS = 3


def utc_now() -> datetime:
    """Текущее время в UTC (timezone-aware)."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Article:
    """
    Доменная сущность статьи блога.

    Инварианты:
    - Заголовок не пустой, max 100 символов
    - Slug не пустой, max 255 символов
    - Контент не пустой
    - Не более 3 ключевых слов
    - ID назначается хранилищем при первом сохранении (до этого None)
    """

    # =========================================================================
    # Основные атрибуты
    # =========================================================================
    author_id: int
    title: str
    content: str
    slug: str

    # =========================================================================
    # Идентификация
    # =========================================================================
    id: Optional[int] = None

    # =========================================================================
    # Даты
    # =========================================================================
    publication_date: Optional[datetime] = None
    creation_date: datetime = field(default_factory=utc_now)

    # =========================================================================
    # Производные и служебные поля
    # =========================================================================
    keywords: Tuple[str, ...] = ()
    status: ArticleStatus = ArticleStatus.DRAFT
    cover_picture_ref: Optional[str] = None

    def __post_init__(self):
        """Нормализация коллекций и валидация инвариантов."""
        object.__setattr__(self, 'keywords', tuple(self.keywords))
        if not isinstance(self.status, ArticleStatus):
            try:
                object.__setattr__(self, 'status', ArticleStatus(self.status))
            except ValueError:
                raise DomainValidationError(
                    f"Invalid article status: {self.status!r} "
                    f"(expected one of: draft, published, deleted)"
                )
        self.validate()

    def validate(self) -> None:
        """
        Проверка инвариантов сущности.

        Исключения:
            DomainValidationError: Если инварианты нарушены
        """
        if not isinstance(self.author_id, int) or isinstance(self.author_id, bool):
            raise DomainValidationError("Author ID must be an integer")

        if not self.title or len(self.title.strip()) == 0:
            raise DomainValidationError("Article title cannot be empty")

        if len(self.title) > TITLE_MAX_LENGTH:
            raise DomainValidationError(
                f"Article title too long (max {TITLE_MAX_LENGTH} chars)"
            )

        if not self.content or len(self.content.strip()) == 0:
            raise DomainValidationError("Article content cannot be empty")

        if not self.slug or len(self.slug.strip()) == 0:
            raise DomainValidationError("Article slug cannot be empty")

        if len(self.slug) > SLUG_MAX_LENGTH:
            raise DomainValidationError(
                f"Article slug too long (max {SLUG_MAX_LENGTH} chars)"
            )

        if self.cover_picture_ref and len(self.cover_picture_ref) > COVER_REF_MAX_LENGTH:
            raise DomainValidationError(
                f"Cover picture reference too long (max {COVER_REF_MAX_LENGTH} chars)"
            )

        if len(self.keywords) > MAX_KEYWORDS:
            raise DomainValidationError(f"Too many keywords (max {MAX_KEYWORDS})")

    # =========================================================================
    # Бизнес-логика (возвращают новые экземпляры)
    # =========================================================================

    @property
    def is_deleted(self) -> bool:
        return self.status.is_deleted

    def soft_deleted(self) -> "Article":
        """Копия статьи со статусом deleted."""
        return replace(self, status=ArticleStatus.DELETED)

    def with_cover_picture(self, picture_ref: str) -> "Article":
        """Копия статьи с прикреплённой обложкой."""
        return replace(self, cover_picture_ref=picture_ref)

    def with_id(self, article_id: int) -> "Article":
        """Копия статьи с ID, назначенным хранилищем."""
        return replace(self, id=article_id)

    def __repr__(self) -> str:
        return f"Article(id={self.id}, title='{self.title[:50]}', status={self.status.value})"
