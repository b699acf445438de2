"""
Value Object: ArticleStatus

Статус публикации статьи блога.
"""

from enum import Enum


class ArticleStatus(str, Enum):
    """Статусы жизненного цикла статьи."""
    
    DRAFT = "draft"                  # Черновик
    PUBLISHED = "published"          # Опубликована
    DELETED = "deleted"              # Мягко удалена (запись остаётся в БД)
    
    @property
    def is_deleted(self) -> bool:
        """Статья помечена как удалённая."""
        return self is ArticleStatus.DELETED