# -*- coding: utf-8 -*-
"""
Загрузка запрещённых слов из настроек.

Источники (объединяются):
- Settings.banned_words: строка через запятую
- Settings.banned_words_file: файл, одно слово на строку, # — комментарий

Набор загружается один раз (lru_cache) и дальше только читается.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

from src.domain.value_objects.banned_words import BannedWords
from src.infrastructure.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def read_words_file(path: Path) -> List[str]:
    """Прочитать слова из файла (пустые строки и комментарии пропускаются)."""
    words = []
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            word = line.split('#', 1)[0].strip()
            if word:
                words.append(word)
    return words


def load_banned_words(settings: Settings) -> BannedWords:
    """
    Собрать BannedWords из настроек.

    Аргументы:
        settings: Настройки приложения

    Возвращает:
        Неизменяемый набор запрещённых слов
    """
    banned = BannedWords.parse(settings.banned_words)

    if settings.banned_words_file:
        path = Path(settings.banned_words_file)
        if path.exists():
            banned = banned.union(read_words_file(path))
        else:
            logger.warning(f"[BannedWords] File not found: {path}")

    logger.info(f"[BannedWords] Loaded {len(banned)} banned words")
    return banned


@lru_cache()
def get_banned_words() -> BannedWords:
    """Закэшированный набор запрещённых слов (сброс: get_banned_words.cache_clear())."""
    return load_banned_words(get_settings())
