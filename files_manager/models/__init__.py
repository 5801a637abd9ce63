from files_manager.models.file import File, FileType
from files_manager.models.user import User

__all__ = ["File", "FileType", "User"]
