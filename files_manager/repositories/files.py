"""
File metadata store adapter.

This module provides lookup, listing and insert operations over the ``files``
table.
"""
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from files_manager.models.file import File


class FileRepository:
    """Find and insert ``File`` records."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, file_id: int) -> File | None:
        return self.db.execute(select(File).where(File.id == file_id)).scalar_one_or_none()

    def find_owned(self, file_id: int, user_id: str) -> File | None:
        """Return the file only when ``user_id`` owns it."""
        stmt = select(File).where(File.id == file_id, File.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def find_for_user(
        self,
        user_id: str,
        parent_id: int | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[File]:
        """
        List files owned by a user, optionally only the children of one folder.

        Rows come back in insertion order (ascending id) so that pages stay
        stable between calls.

        Args:
            user_id: Owner id (string form)
            parent_id: Exact parent id to match, or None for every file
            skip: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            List of File records, possibly empty
        """
        stmt = select(File).where(File.user_id == user_id)
        if parent_id is not None:
            stmt = stmt.where(File.parent_id == parent_id)
        stmt = stmt.order_by(File.id).offset(skip).limit(limit)
        return list(self.db.execute(stmt).scalars().all())

    def insert(self, file: File) -> File:
        """Persist a new record and return it with its assigned id."""
        self.db.add(file)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(file)
        return file

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(File)).scalar_one()
