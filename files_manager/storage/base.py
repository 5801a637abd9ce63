"""
Abstract base class for content writers.

This module defines the interface the file service uses to persist and clean
up uploaded bytes.
"""
from abc import ABC, abstractmethod


class ContentWriter(ABC):
    """
    Abstract base class for content storage backends.

    Implementations choose the stored name themselves; it never depends on
    the name the caller gave the file.
    """

    @abstractmethod
    async def save(self, data: bytes) -> str:
        """
        Write raw bytes under a newly generated name.

        Args:
            data: Decoded file contents

        Returns:
            Full path of the written file

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """
        Remove previously saved content.

        Args:
            path: Path returned by ``save``

        Raises:
            ContentNotFoundError: If nothing is stored at ``path``
            StorageError: If the delete fails
        """
        pass
