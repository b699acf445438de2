# -*- coding: utf-8 -*-
"""
Local Picture Storage — сохранение обложек статей на диск.

Имя файла: uuid4().hex + расширение, например
"3f2c9a0e8b7d4c1f9e6a5b4c3d2e1f00.jpg".

Расположение по умолчанию: public/uploaded_pictures (см. Settings.upload_dir)
"""

import logging
import mimetypes
from pathlib import Path
from typing import Optional
from uuid import uuid4

import aiofiles
import aiofiles.os

from src.domain.repositories.picture_storage import IPictureStorage
from src.shared.exceptions.infrastructure_exceptions import StorageError

logger = logging.getLogger(__name__)

# mimetypes отдаёт для image/jpeg ".jpg", ".jpe" или ".jpeg" в зависимости от платформы
_EXTENSION_ALIASES = {
    "jpe": "jpg",
    "jpeg": "jpg",
}


def guess_extension(content_type: Optional[str], filename: Optional[str] = None) -> Optional[str]:
    """
    Определить расширение файла (без точки).

    Сначала по MIME типу, затем по имени исходного файла.
    """
    extension = None
    if content_type:
        guessed = mimetypes.guess_extension(content_type.split(";")[0].strip().lower())
        if guessed:
            extension = guessed.lstrip(".")
    if not extension and filename:
        suffix = Path(filename).suffix
        if suffix:
            extension = suffix.lstrip(".")
    if not extension:
        return None
    extension = extension.lower()
    return _EXTENSION_ALIASES.get(extension, extension)


class LocalPictureStorage(IPictureStorage):
    """
    Хранилище обложек в локальной директории.

    Использование:
        storage = LocalPictureStorage(Path("public/uploaded_pictures"))
        name = await storage.store(data, "jpg")
        path = storage.path_for(name)
    """

    def __init__(self, upload_dir: Path):
        """
        Инициализация.

        Args:
            upload_dir: Директория для файлов (создаётся при первой записи)
        """
        self.upload_dir = Path(upload_dir)

    def _ensure_directory(self):
        """Создать директорию если не существует."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def generate_name(extension: Optional[str] = None) -> str:
        name = uuid4().hex
        if extension:
            name = f"{name}.{extension.lstrip('.')}"
        return name

    def path_for(self, name: str) -> Path:
        return self.upload_dir / name

    async def store(self, data: bytes, extension: Optional[str] = None) -> str:
        """Записать файл и вернуть его имя."""
        name = self.generate_name(extension)
        path = self.path_for(name)

        try:
            self._ensure_directory()
            async with aiofiles.open(path, "wb") as f:
                await f.write(data)
        except OSError as e:
            logger.error(f"[PictureStorage] Failed to write {path}: {e}")
            raise StorageError("Failed to upload file") from e

        logger.info(f"[PictureStorage] Stored {name} ({len(data)} bytes)")
        return name

    async def delete(self, name: str) -> bool:
        """Удалить файл (например, если статью не удалось сохранить)."""
        path = self.path_for(name)
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            logger.error(f"[PictureStorage] Failed to delete {path}: {e}")
            raise StorageError(f"Failed to delete file {name}") from e

        logger.info(f"[PictureStorage] Deleted {name}")
        return True
