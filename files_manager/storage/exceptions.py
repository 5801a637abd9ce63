"""
Storage-specific exceptions.
"""


class StorageError(Exception):
    """Base exception for storage operations."""

    pass


class ContentNotFoundError(StorageError):
    """Raised when stored content is missing from disk."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Stored content not found: {path}")
