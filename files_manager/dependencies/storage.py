"""
Storage dependency injection for FastAPI.
"""
from files_manager.config import settings
from files_manager.storage.base import ContentWriter
from files_manager.storage.local import LocalContentWriter


def get_storage() -> ContentWriter:
    """
    Return the content writer rooted at ``FOLDER_PATH``.

    Returns:
        ContentWriter instance
    """
    return LocalContentWriter(base_path=settings.FOLDER_PATH)
