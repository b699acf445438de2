"""
CQRS Command: UpdateArticleCommand

Частичное обновление статьи (PATCH).
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional

from src.domain.value_objects.article_status import ArticleStatus


@dataclass(frozen=True)
class UpdateArticleCommand:
    """
    Команда обновления статьи.
    
    None означает "поле не передано" — такое поле остаётся без изменений.
    """
    
    title: Optional[str] = None
    content: Optional[str] = None
    publication_date: Optional[datetime] = None
    status: Optional[ArticleStatus] = None
    slug: Optional[str] = None
    cover_picture_ref: Optional[str] = None
    
    def provided_fields(self) -> dict:
        """Переданные поля (кроме content)."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "content" and getattr(self, f.name) is not None
        }