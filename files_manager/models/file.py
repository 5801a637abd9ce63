"""
File database model.

A single table holds folders, regular files and images. The ``type`` column
tells them apart; only files and images carry a ``local_path``.
"""
import enum
from datetime import datetime

from sqlalchemy import Boolean, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column

from files_manager.database import Base

# parent_id value for records that live at the top level
ROOT_PARENT_ID = 0


class FileType(str, enum.Enum):
    FOLDER = "folder"
    FILE = "file"
    IMAGE = "image"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


class File(Base):
    """
    Metadata for an uploaded file, image or folder.

    Attributes:
        id: Primary key, assigned by the database on insert
        name: Caller supplied display name
        type: One of ``FileType``; never changes after creation
        parent_id: Id of the containing folder, or ``ROOT_PARENT_ID``
        is_public: Visibility flag
        user_id: Owner id, stored in its string form
        local_path: Location of the stored bytes (files and images only)
        created_at: Insert timestamp
    """

    __tablename__ = "files"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255))
    type: Mapped[str] = mapped_column(String(10))
    parent_id: Mapped[int] = mapped_column(Integer, default=ROOT_PARENT_ID, index=True)
    is_public: Mapped[bool] = mapped_column(Boolean, default=False)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    local_path: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    @property
    def is_folder(self) -> bool:
        return self.type == FileType.FOLDER.value

    def __repr__(self) -> str:
        return f"<File(id={self.id}, name={self.name}, type={self.type})>"
