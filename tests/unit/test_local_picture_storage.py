"""
Unit tests для LocalPictureStorage.
"""

from unittest.mock import patch

import pytest

from src.infrastructure.storage.local_picture_storage import LocalPictureStorage, guess_extension
from src.shared.exceptions.infrastructure_exceptions import StorageError


@pytest.mark.asyncio
async def test_store_writes_file(tmp_path):
    storage = LocalPictureStorage(tmp_path / "uploaded_pictures")

    name = await storage.store(b"\xff\xd8\xff", "jpg")

    assert name.endswith(".jpg")
    assert storage.path_for(name).read_bytes() == b"\xff\xd8\xff"


@pytest.mark.asyncio
async def test_store_generates_unique_names(tmp_path):
    storage = LocalPictureStorage(tmp_path)

    first = await storage.store(b"1", "png")
    second = await storage.store(b"2", "png")

    assert first != second


@pytest.mark.asyncio
async def test_store_without_extension(tmp_path):
    storage = LocalPictureStorage(tmp_path)
    name = await storage.store(b"data")
    assert "." not in name


@pytest.mark.asyncio
async def test_store_wraps_os_errors(tmp_path):
    storage = LocalPictureStorage(tmp_path)

    with patch("src.infrastructure.storage.local_picture_storage.aiofiles.open", side_effect=OSError("disk full")):
        with pytest.raises(StorageError):
            await storage.store(b"data", "jpg")


@pytest.mark.parametrize("content_type, filename, expected", [
    ("image/jpeg", None, "jpg"),
    ("image/png", "cover.jpg", "png"),
    (None, "cover.JPEG", "jpg"),
    ("application/x-unknown-type", "cover.webp", "webp"),
    (None, None, None),
])
def test_guess_extension(content_type, filename, expected):
    assert guess_extension(content_type, filename) == expected


@pytest.mark.asyncio
async def test_delete_removes_file(tmp_path):
    storage = LocalPictureStorage(tmp_path)
    name = await storage.store(b"data", "jpg")

    assert await storage.delete(name) is True
    assert not storage.path_for(name).exists()


@pytest.mark.asyncio
async def test_delete_missing_file(tmp_path):
    storage = LocalPictureStorage(tmp_path)
    assert await storage.delete("missing.jpg") is False
