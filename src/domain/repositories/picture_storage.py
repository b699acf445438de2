"""
Storage Interface: IPictureStorage

Порт для сохранения загруженных обложек статей.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IPictureStorage(ABC):
    """Хранилище файлов обложек."""

    @abstractmethod
    async def store(self, data: bytes, extension: Optional[str] = None) -> str:
        """
        Сохранить файл.

        Args:
            data: Содержимое файла
            extension: Расширение без точки ("jpg"), если известно

        Returns:
            Сгенерированное имя файла (ссылка для cover_picture_ref)

        Raises:
            StorageError: Если файл не удалось записать
        """
        pass

    @abstractmethod
    async def delete(self, name: str) -> bool:
        """
        Удалить ранее сохранённый файл.

        Args:
            name: Имя, которое вернул store()

        Returns:
            True если файл был удалён
        """
        pass
