"""
Storage abstraction layer for file contents.

Uploaded bytes are written through a ``ContentWriter``; the local filesystem
implementation is the only one shipped.
"""

from files_manager.storage.base import ContentWriter
from files_manager.storage.exceptions import ContentNotFoundError, StorageError
from files_manager.storage.local import LocalContentWriter

__all__ = [
    "ContentWriter",
    "LocalContentWriter",
    "StorageError",
    "ContentNotFoundError",
]
