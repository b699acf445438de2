# -*- coding: utf-8 -*-
"""
SQLAlchemy модели — инфраструктурный слой.

Таблица blog_articles: одна строка на статью, мягко удалённые статьи
остаются в таблице со статусом deleted.
"""

from sqlalchemy import Column, Integer, String, Text, DateTime, JSON
from sqlalchemy.orm import declarative_base

from src.domain.entities.article import utc_now

Base = declarative_base()


class BlogArticleModel(Base):
    """
    SQLAlchemy модель статьи блога.

    Маппинг особенностей:
    - entity.keywords (tuple) ↔ model.keywords (JSON массив)
    - entity.status (ArticleStatus) ↔ model.status (строка)
    """

    __tablename__ = "blog_articles"

    # =========================================================================
    # Основные поля
    # =========================================================================
    id = Column(Integer, primary_key=True, autoincrement=True)
    author_id = Column(Integer, nullable=False, index=True)
    title = Column(String(100), nullable=False)
    content = Column(Text, nullable=False)
    slug = Column(String(255), nullable=False, index=True)

    # =========================================================================
    # Даты
    # =========================================================================
    publication_date = Column(DateTime(timezone=True))
    creation_date = Column(DateTime(timezone=True), nullable=False, default=utc_now)

    # =========================================================================
    # Производные и служебные поля
    # =========================================================================
    keywords = Column(
        JSON,
        default=list,
        comment="Топ-3 слова контента по частоте"
    )
    status = Column(String(50), nullable=False, default="draft", index=True)
    cover_picture_ref = Column(
        String(255),
        comment="Имя файла обложки в upload_dir"
    )

    def __repr__(self):
        return f"<BlogArticleModel(id={self.id}, title='{(self.title or '')[:50]}')>"
