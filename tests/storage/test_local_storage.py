"""
Unit tests for LocalContentWriter.
"""
import os

import pytest

from files_manager.storage.base import ContentWriter
from files_manager.storage.exceptions import ContentNotFoundError, StorageError
from files_manager.storage.local import LocalContentWriter


@pytest.mark.asyncio
async def test_save_creates_missing_root(tmp_path):
    root = tmp_path / "a" / "b" / "files"
    storage = LocalContentWriter(base_path=str(root))

    path = await storage.save(b"content")

    assert root.is_dir()
    with open(path, "rb") as f:
        assert f.read() == b"content"


@pytest.mark.asyncio
async def test_save_into_existing_root(tmp_path):
    storage = LocalContentWriter(base_path=str(tmp_path))

    path = await storage.save(b"")

    assert os.path.isfile(path)


@pytest.mark.asyncio
async def test_save_uses_flat_unique_names(tmp_path):
    storage = LocalContentWriter(base_path=str(tmp_path))

    paths = {await storage.save(b"x") for _ in range(5)}

    assert len(paths) == 5
    assert {p.rsplit("/", 1)[0] for p in paths} == {str(tmp_path.resolve())}


@pytest.mark.asyncio
async def test_save_fails_when_root_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_bytes(b"not a directory")
    storage = LocalContentWriter(base_path=str(blocker))

    with pytest.raises(StorageError):
        await storage.save(b"x")


@pytest.mark.asyncio
async def test_delete(tmp_path):
    storage = LocalContentWriter(base_path=str(tmp_path))
    path = await storage.save(b"x")

    await storage.delete(path)

    assert not os.path.exists(path)


@pytest.mark.asyncio
async def test_delete_missing_content(tmp_path):
    storage = LocalContentWriter(base_path=str(tmp_path))

    with pytest.raises(ContentNotFoundError):
        await storage.delete(str(tmp_path / "missing"))


def test_writer_interface_is_save_and_delete():
    assert ContentWriter.__abstractmethods__ == frozenset({"save", "delete"})
