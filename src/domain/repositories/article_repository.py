"""
Repository Interface: IArticleRepository

Порт (интерфейс) для работы с хранилищем статей.
Реализации (адаптеры) находятся в infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.article import Article
from src.domain.value_objects.article_status import ArticleStatus


class IArticleRepository(ABC):
    """
    Интерфейс репозитория статей.
    
    Следует Repository Pattern и является портом в Hexagonal Architecture.
    Физического удаления нет: мягкое удаление — это update со статусом deleted.
    """
    
    @abstractmethod
    async def save(self, article: Article) -> Article:
        """
        Сохранить новую статью.
        
        Args:
            article: Статья без ID
            
        Returns:
            Сохранённая статья с назначенным ID
        """
        pass
    
    @abstractmethod
    async def update(self, article: Article) -> None:
        """
        Записать изменения существующей статьи.
        
        Args:
            article: Статья с ID
            
        Raises:
            EntityNotFoundError: Если статьи с таким ID нет
        """
        pass
    
    @abstractmethod
    async def find_by_id(self, article_id: int) -> Optional[Article]:
        """
        Найти статью по ID.
        
        Args:
            article_id: ID статьи
            
        Returns:
            Статья или None
        """
        pass
    
    @abstractmethod
    async def find_all(
        self,
        status: Optional[ArticleStatus] = None,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0
    ) -> List[Article]:
        """
        Получить список статей с фильтрацией.
        
        Args:
            status: Фильтр по статусу (имеет приоритет над include_deleted)
            include_deleted: Включать мягко удалённые статьи
            limit: Лимит записей
            offset: Смещение
            
        Returns:
            Список статей
        """
        pass
    
    @abstractmethod
    async def count(self, status: Optional[ArticleStatus] = None) -> int:
        """
        Подсчитать количество статей.
        
        Args:
            status: Фильтр по статусу
            
        Returns:
            Количество статей
        """
        pass
