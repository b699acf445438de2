# -*- coding: utf-8 -*-
"""
Value Object: BannedWords

Неизменяемый набор запрещённых слов.

Слова нормализуются так же, как токены текста (нижний регистр, без пробелов
по краям), поэтому проверка "токен в наборе" регистронезависима.
Набор загружается один раз при старте и передаётся в доменные сервисы
явно; для смены конфигурации создаётся новый экземпляр.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Iterator


@dataclass(frozen=True)
class BannedWords:
    """Запрещённые слова (frozenset нормализованных токенов)."""

    words: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        normalized = frozenset(
            w.strip().lower() for w in self.words if w and w.strip()
        )
        object.__setattr__(self, 'words', normalized)

    @classmethod
    def of(cls, words: Iterable[str]) -> "BannedWords":
        """Создать набор из произвольной коллекции строк."""
        return cls(frozenset(words))

    @classmethod
    def empty(cls) -> "BannedWords":
        return cls()

    @classmethod
    def parse(cls, raw: str, separator: str = ",") -> "BannedWords":
        """
        Разобрать строку вида "banned1, banned2".

        Пустые элементы пропускаются.
        """
        if not raw:
            return cls()
        return cls(frozenset(raw.split(separator)))

    def union(self, other: Iterable[str]) -> "BannedWords":
        """Новый набор, объединённый с other."""
        return BannedWords(self.words | frozenset(other))

    def __contains__(self, token: object) -> bool:
        if not isinstance(token, str):
            return False
        return token.lower() in self.words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.words))

    def __len__(self) -> int:
        return len(self.words)

    def __bool__(self) -> bool:
        return bool(self.words)
