from fastapi import Depends
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.dependencies.clients import get_notifier
from files_manager.dependencies.storage import get_storage
from files_manager.repositories.files import FileRepository
from files_manager.services.files import FileService
from files_manager.services.jobs import JobNotifier
from files_manager.storage.base import ContentWriter


def get_file_service(
    db: Session = Depends(get_db),
    storage: ContentWriter = Depends(get_storage),
    notifier: JobNotifier = Depends(get_notifier),
) -> FileService:
    return FileService(FileRepository(db), storage, notifier)
