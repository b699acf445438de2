# -*- coding: utf-8 -*-
"""
Domain Service: анализ текста статьи.

- tokenize: разбиение текста на токены (слова в нижнем регистре)
- is_allowed / find_banned: проверка на запрещённые слова
- top_keywords: топ-N ключевых слов по частоте

Все функции чистые: без I/O и глобального состояния.
Набор запрещённых слов передаётся явно.

Токен — максимальная последовательность символов \\w (буквы, цифры,
подчёркивание). Всё остальное — разделители.
"""

import re
from collections import Counter
from typing import AbstractSet, Iterable, Iterator, List, Optional, Tuple, Union

from src.domain.value_objects.banned_words import BannedWords

_TOKEN_RE = re.compile(r"\w+")

DEFAULT_KEYWORD_LIMIT = 3

BannedSet = Union[BannedWords, AbstractSet[str]]
Text = Union[str, bytes, None]


def _as_text(text: Text) -> str:
    if text is None:
        return ""
    if isinstance(text, bytes):
        try:
            return text.decode("utf-8")
        except UnicodeDecodeError:
            return ""
    return text


def _normalize_banned(banned: Optional[BannedSet]) -> BannedWords:
    if banned is None:
        return BannedWords.empty()
    if isinstance(banned, BannedWords):
        return banned
    return BannedWords.of(banned)


def tokenize(text: Text) -> Iterator[str]:
    """
    Ленивая последовательность токенов текста.

    >>> list(tokenize("Hello, world!!"))
    ['hello', 'world']
    """
    for match in _TOKEN_RE.finditer(_as_text(text)):
        yield match.group(0).lower()


def filter_banned(tokens: Iterable[str], banned: Optional[BannedSet]) -> Iterator[str]:
    """Отбросить запрещённые токены."""
    banned_words = _normalize_banned(banned)
    return (t for t in tokens if t not in banned_words)


def find_banned(content: Text, banned: Optional[BannedSet]) -> Tuple[str, ...]:
    """
    Запрещённые слова, найденные в тексте.

    Возвращает уникальные токены в порядке первого появления.
    """
    banned_words = _normalize_banned(banned)
    if not banned_words:
        return ()

    found = {}
    for token in tokenize(content):
        if token in banned_words:
            found.setdefault(token, None)
    return tuple(found)


def is_allowed(content: Text, banned: Optional[BannedSet]) -> bool:
    """
    Проверить, что текст не содержит запрещённых слов.

    Сравнение — точное совпадение токена без учёта регистра
    (не подстрока). Пустой текст допустим.
    """
    banned_words = _normalize_banned(banned)
    if not banned_words:
        return True
    return not any(token in banned_words for token in tokenize(content))


def count_tokens(content: Text, banned: Optional[BannedSet] = None) -> Counter:
    """Частоты токенов (без запрещённых), в порядке первого появления."""
    return Counter(filter_banned(tokenize(content), banned))


def top_keywords(
    content: Text,
    banned: Optional[BannedSet] = None,
    n: int = DEFAULT_KEYWORD_LIMIT,
) -> List[str]:
    """
    Топ-N ключевых слов по убыванию частоты.

    При равной частоте порядок определяется первым появлением слова
    в тексте: Counter сохраняет порядок вставки, sorted() стабилен.

    Аргументы:
        content: Текст статьи
        banned: Запрещённые слова (не попадают в результат)
        n: Сколько слов вернуть

    Возвращает:
        Не более n токенов; пустой список для пустого текста
        или если все слова запрещены.
    """
    if n <= 0:
        return []

    counts = count_tokens(content, banned)
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [token for token, _ in ranked[:n]]
