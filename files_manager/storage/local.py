"""
Local filesystem content writer.

Every upload becomes one file named by a fresh UUID4, stored flat under the
configured root directory:

    <FOLDER_PATH>/<uuid4>
"""
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from files_manager.config import settings
from files_manager.storage.base import ContentWriter
from files_manager.storage.exceptions import ContentNotFoundError, StorageError


class LocalContentWriter(ContentWriter):
    """
    Local filesystem storage with async operations.

    The root directory is created on first write if it is missing.
    """

    def __init__(self, base_path: str | None = None):
        """
        Initialize local content writer.

        Args:
            base_path: Root directory for stored content (default from config)
        """
        self.base_path = Path(base_path or settings.FOLDER_PATH).resolve()

    async def save(self, data: bytes) -> str:
        """
        Write bytes to ``<base_path>/<uuid4>``.

        Args:
            data: Decoded file contents

        Returns:
            Full file path where the content was saved

        Raises:
            StorageError: If the directory or the file cannot be written
        """
        file_path = self.base_path / self._generate_name()

        try:
            await self._ensure_root_exists()
            async with aiofiles.open(file_path, "wb") as f:
                await f.write(data)
        except OSError as e:
            # Leave nothing half-written behind
            if await aiofiles.os.path.exists(file_path):
                await aiofiles.os.remove(file_path)
            raise StorageError(f"Failed to save file: {str(e)}") from e

        return str(file_path)

    async def delete(self, path: str) -> None:
        """
        Delete stored content.

        Args:
            path: Path returned by ``save``

        Raises:
            ContentNotFoundError: If the file doesn't exist
            StorageError: If the delete fails
        """
        if not await aiofiles.os.path.exists(path):
            raise ContentNotFoundError(path)

        try:
            await aiofiles.os.remove(path)
        except OSError as e:
            raise StorageError(f"Failed to delete file: {str(e)}") from e

    def _generate_name(self) -> str:
        return str(uuid.uuid4())

    async def _ensure_root_exists(self) -> None:
        """Create the root directory tree; a no-op when it already exists."""
        if not await aiofiles.os.path.isdir(self.base_path):
            await aiofiles.os.makedirs(self.base_path, exist_ok=True)
