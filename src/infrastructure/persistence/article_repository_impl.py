# -*- coding: utf-8 -*-
"""
PostgreSQL Repository реализация.

Маппинг Article entity ↔ BlogArticleModel.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import select, func

from src.domain.entities.article import Article
from src.domain.repositories.article_repository import IArticleRepository
from src.domain.value_objects.article_status import ArticleStatus
from src.infrastructure.persistence.models import BlogArticleModel
from src.shared.exceptions.domain_exceptions import EntityNotFoundError
from src.shared.exceptions.infrastructure_exceptions import DatabaseError


class ArticleRepositoryImpl(IArticleRepository):
    """
    Реализация repository для PostgreSQL.

    Адаптер в Hexagonal Architecture.
    Преобразует доменные сущности Article в SQLAlchemy модели и обратно.
    """

    def __init__(self, session: AsyncSession):
        """
        Инициализация репозитория.

        Аргументы:
            session: Асинхронная сессия SQLAlchemy
        """
        self.session = session

    async def save(self, article: Article) -> Article:
        """Сохранить новую статью в БД, ID назначает БД."""
        model = self._to_model(article)
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(f"Failed to save article: {e}") from e
        return self._to_entity(model)

    async def update(self, article: Article) -> None:
        """Перенести поля entity в существующую строку."""
        model = await self.session.get(BlogArticleModel, article.id)
        if model is None:
            raise EntityNotFoundError("Article", article.id)

        self._apply(article, model)
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseError(f"Failed to update article {article.id}: {e}") from e

    async def find_by_id(self, article_id: int) -> Optional[Article]:
        """Найти статью по ID."""
        result = await self.session.execute(
            select(BlogArticleModel).where(BlogArticleModel.id == article_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def find_all(
        self,
        status: Optional[ArticleStatus] = None,
        include_deleted: bool = False,
        limit: int = 100,
        offset: int = 0
    ) -> List[Article]:
        """Получить список статей с фильтрацией."""
        query = select(BlogArticleModel)

        if status:
            query = query.where(BlogArticleModel.status == status.value)
        elif not include_deleted:
            query = query.where(BlogArticleModel.status != ArticleStatus.DELETED.value)

        query = query.order_by(BlogArticleModel.id).limit(limit).offset(offset)

        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to list articles: {e}") from e
        models = result.scalars().all()
        return [self._to_entity(m) for m in models]

    async def count(self, status: Optional[ArticleStatus] = None) -> int:
        """Подсчитать количество статей."""
        query = select(func.count(BlogArticleModel.id))

        if status:
            query = query.where(BlogArticleModel.status == status.value)

        result = await self.session.execute(query)
        return result.scalar()

    # =========================================================================
    # Маппинг Entity ↔ Model
    # =========================================================================

    def _apply(self, entity: Article, model: BlogArticleModel) -> BlogArticleModel:
        """Скопировать изменяемые поля entity в модель."""
        model.author_id = entity.author_id
        model.title = entity.title
        model.content = entity.content
        model.slug = entity.slug
        model.publication_date = entity.publication_date
        model.creation_date = entity.creation_date
        model.keywords = list(entity.keywords)
        model.status = entity.status.value
        model.cover_picture_ref = entity.cover_picture_ref
        return model

    def _to_model(self, entity: Article) -> BlogArticleModel:
        """Конвертация Article → BlogArticleModel (id не задаётся для новых)."""
        model = BlogArticleModel()
        if entity.id is not None:
            model.id = entity.id
        return self._apply(entity, model)

    def _to_entity(self, model: BlogArticleModel) -> Article:
        """
        Конвертация BlogArticleModel → Article.

        None вместо keywords заменяется на пустой кортеж.
        """
        return Article(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            slug=model.slug,
            publication_date=model.publication_date,
            creation_date=model.creation_date,
            keywords=tuple(model.keywords or ()),
            status=ArticleStatus(model.status),
            cover_picture_ref=model.cover_picture_ref,
        )
