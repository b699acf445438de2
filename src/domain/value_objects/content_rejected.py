"""
Value Object: ContentRejected

Результат проверки контента: текст содержит запрещённые слова.

Возвращается (а не выбрасывается) подготовкой статьи, чтобы вызывающий
слой сам решал, какой ответ отдать клиенту.
"""

from dataclasses import dataclass
from typing import Tuple

REJECTION_MESSAGE = "Content contains banned words"


@dataclass(frozen=True)
class ContentRejected:
    """Контент отклонён валидатором."""

    banned_words: Tuple[str, ...] = ()
    message: str = REJECTION_MESSAGE

    def to_dict(self) -> dict:
        return {"detail": self.message, "banned_words": list(self.banned_words)}
