# -*- coding: utf-8 -*-
"""
Подготовка статьи к сохранению.

Проверяет контент на запрещённые слова, вычисляет ключевые слова
и собирает новый экземпляр Article. Ничего не сохраняет и не читает:
хранилище вызывает ArticleCommandHandler.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, Optional, Union

from src.application.commands.create_article_command import CreateArticleCommand
from src.application.commands.update_article_command import UpdateArticleCommand
from src.domain.entities.article import MAX_KEYWORDS, Article, utc_now
from src.domain.services.text_analysis import DEFAULT_KEYWORD_LIMIT, find_banned, top_keywords
from src.domain.value_objects.banned_words import BannedWords
from src.domain.value_objects.content_rejected import ContentRejected

logger = logging.getLogger(__name__)

PreparedArticle = Union[Article, ContentRejected]


class ArticlePreparer:
    """
    Чистая оркестрация: валидация контента + ключевые слова.

    Использование:
        preparer = ArticlePreparer(BannedWords.parse("banned1,banned2"))

        result = preparer.prepare_for_create(command)
        if isinstance(result, ContentRejected):
            ...  # 400
    """

    def __init__(
        self,
        banned_words: Optional[BannedWords] = None,
        keyword_limit: int = DEFAULT_KEYWORD_LIMIT,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.banned_words = banned_words or BannedWords.empty()
        # Article хранит не больше MAX_KEYWORDS слов
        self.keyword_limit = min(keyword_limit, MAX_KEYWORDS)
        self.clock = clock

    def check_content(self, content: str) -> Optional[ContentRejected]:
        """Вернуть ContentRejected, если в тексте есть запрещённые слова."""
        found = find_banned(content, self.banned_words)
        if found:
            logger.warning(f"[ArticlePreparer] Content rejected, banned words: {', '.join(found)}")
            return ContentRejected(banned_words=found)
        return None

    def extract_keywords(self, content: str) -> tuple:
        return tuple(top_keywords(content, self.banned_words, self.keyword_limit))

    def prepare_for_create(self, command: CreateArticleCommand) -> PreparedArticle:
        """
        Собрать новую статью из команды создания.

        Возвращает:
            Article без ID (его назначит хранилище) или ContentRejected

        Исключения:
            DomainValidationError: Если нарушены инварианты Article
        """
        rejected = self.check_content(command.content)
        if rejected:
            return rejected

        return Article(
            author_id=command.author_id,
            title=command.title,
            content=command.content,
            slug=command.slug,
            publication_date=command.publication_date,
            creation_date=self.clock(),
            keywords=self.extract_keywords(command.content),
            status=command.status,
            cover_picture_ref=command.cover_picture_ref,
        )

    def prepare_for_update(
        self,
        existing: Article,
        command: UpdateArticleCommand
    ) -> PreparedArticle:
        """
        Применить частичное обновление.

        Если передан content — он проверяется, а ключевые слова
        пересчитываются только по новому тексту. Остальные переданные поля
        копируются как есть. existing не изменяется.
        """
        changes = command.provided_fields()

        if command.content is not None:
            rejected = self.check_content(command.content)
            if rejected:
                return rejected
            changes["content"] = command.content
            changes["keywords"] = self.extract_keywords(command.content)

        if not changes:
            return existing
        return replace(existing, **changes)

    def prepare_for_delete(self, existing: Article) -> Article:
        """Мягкое удаление: статус deleted, запись остаётся."""
        return existing.soft_deleted()
