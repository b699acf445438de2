"""
CQRS Command: CreateArticleCommand

Команда для создания новой статьи блога.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.domain.value_objects.article_status import ArticleStatus


@dataclass(frozen=True)
class CreateArticleCommand:
    """
    Команда создания статьи.
    
    Иммутабельна (frozen=True) - следует принципу CQRS.
    Ключевые слова не передаются: они вычисляются из content.
    """
    
    # Required
    author_id: int
    title: str
    content: str
    slug: str
    
    # Optional
    publication_date: Optional[datetime] = None
    status: ArticleStatus = ArticleStatus.DRAFT
    cover_picture_ref: Optional[str] = None
