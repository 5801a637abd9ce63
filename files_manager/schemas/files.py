"""
Schemas for the files endpoints.

Field names follow the public JSON contract (camelCase) through an alias
generator; Python code uses the snake_case names.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from files_manager.models.file import File


class FileUploadRequest(BaseModel):
    """Upload payload.

    ``name``, ``type``, ``parentId`` and ``data`` are accepted untyped so that
    missing or malformed values are reported in a fixed order by the file
    service instead of as a schema error.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Any = None
    type: Any = None
    parent_id: Any = None
    is_public: bool | None = None
    data: Any = None
    """Base64 encoded file contents (not used for folders)"""


class FileResponse(BaseModel):
    """Public view of a File record. The storage path is never included."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    user_id: str
    name: str
    type: str
    is_public: bool
    parent_id: int

    @classmethod
    def from_record(cls, record: File) -> "FileResponse":
        return cls(
            id=record.id,
            user_id=record.user_id,
            name=record.name,
            type=record.type,
            is_public=record.is_public,
            parent_id=record.parent_id,
        )


class FileShowResponse(BaseModel):
    file: FileResponse
