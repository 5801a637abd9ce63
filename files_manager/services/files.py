"""
File service.

Implements upload, listing and show on top of the metadata repository, the
content writer and the job notifier. Every method either returns the public
response model or raises a ``FilesManagerError``; turning those into HTTP
responses is left to the API layer.
"""
import base64
import binascii
from collections.abc import Callable

from fastapi.concurrency import run_in_threadpool

from files_manager.config import settings
from files_manager.exceptions import AuthenticationError, NotFoundError, ValidationError
from files_manager.logging_config import setup_logging
from files_manager.models.file import ROOT_PARENT_ID, File, FileType
from files_manager.models.user import User
from files_manager.repositories.files import FileRepository
from files_manager.schemas.files import FileResponse, FileUploadRequest
from files_manager.services.jobs import JobNotifier, notify_safely
from files_manager.storage.base import ContentWriter
from files_manager.storage.exceptions import StorageError

logger = setup_logging()

# Signature of BackgroundTasks.add_task: callable followed by its arguments
Scheduler = Callable[..., None]

_ROOT_VALUES = (None, "", 0, "0")

# Largest value a signed 64-bit INTEGER column can hold
MAX_RECORD_ID = 2**63 - 1


def _parse_int(value) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdecimal():
            try:
                return int(text)
            except ValueError:
                return None
    return None


def parse_record_id(value) -> int | None:
    """Return the integer record id held by ``value``, or None if it holds none."""
    number = _parse_int(value)
    if number is None or not 0 <= number <= MAX_RECORD_ID:
        return None
    return number


def parse_page(value) -> int:
    """1-based page number; anything missing, unparsable or below 1 means page 1."""
    page = _parse_int(value)
    if page is None or page < 1:
        return 1
    return page


def decode_payload(data: str) -> bytes:
    """
    Decode base64 upload data.

    Whitespace and missing trailing padding are tolerated; any other
    character outside the base64 alphabet is rejected.

    Raises:
        ValidationError: "Invalid data" if the text is not base64
    """
    compact = "".join(data.split())
    padded = compact + "=" * (-len(compact) % 4)
    try:
        return base64.b64decode(padded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Invalid data") from e


class FileService:
    """Orchestrates the metadata store, content writer and job notifier."""

    def __init__(
        self,
        files: FileRepository,
        writer: ContentWriter,
        notifier: JobNotifier,
        page_size: int | None = None,
    ):
        self.files = files
        self.writer = writer
        self.notifier = notifier
        self.page_size = page_size or settings.FILES_PAGE_SIZE

    async def upload(
        self,
        user: User | None,
        payload: FileUploadRequest,
        schedule: Scheduler | None = None,
    ) -> FileResponse:
        """
        Create a folder, file or image record.

        Content is written to disk before the metadata insert. For images a
        post-processing job is published afterwards; it is handed to
        ``schedule`` when given (so it runs after the response is sent) and
        awaited inline otherwise. Publishing failures never fail the upload.

        Args:
            user: Authenticated user, or None
            payload: Upload request
            schedule: Optional ``BackgroundTasks.add_task``-style callable

        Returns:
            FileResponse for the created record

        Raises:
            AuthenticationError: If ``user`` is None
            ValidationError: On the first broken input rule
            StorageError: If the content cannot be written
        """
        if user is None:
            raise AuthenticationError()

        self._validate_upload(payload)
        parent_id = await self._resolve_parent(payload.parent_id)

        record = File(
            name=payload.name,
            type=payload.type,
            parent_id=parent_id,
            is_public=bool(payload.is_public),
            user_id=str(user.id),
        )

        if payload.type == FileType.FOLDER.value:
            record = await run_in_threadpool(self.files.insert, record)
            logger.info(f"Folder created: file_id={record.id}, user_id={record.user_id}")
            return FileResponse.from_record(record)

        content = decode_payload(payload.data)
        record.local_path = await self.writer.save(content)

        try:
            record = await run_in_threadpool(self.files.insert, record)
        except Exception:
            await self._discard_content(record.local_path)
            raise

        logger.info(
            f"File stored: file_id={record.id}, type={record.type}, "
            f"size={len(content)}, user_id={record.user_id}"
        )

        if record.type == FileType.IMAGE.value:
            if schedule is not None:
                schedule(notify_safely, self.notifier, record.user_id, record.id)
            else:
                await notify_safely(self.notifier, record.user_id, record.id)

        return FileResponse.from_record(record)

    async def list_files(self, user: User | None, parent_id=None, page=None) -> list[FileResponse]:
        """
        List one page of the user's files.

        Args:
            user: Authenticated user, or None
            parent_id: Optional exact parent filter; a value that is not an id
                matches nothing
            page: 1-based page number

        Returns:
            Up to ``page_size`` records, possibly none

        Raises:
            AuthenticationError: If ``user`` is None
        """
        if user is None:
            raise AuthenticationError()

        parent_filter = None
        if parent_id not in (None, ""):
            parent_filter = parse_record_id(parent_id)
            if parent_filter is None:
                return []

        skip = (parse_page(page) - 1) * self.page_size
        if skip > MAX_RECORD_ID:
            return []

        records = await run_in_threadpool(
            self.files.find_for_user,
            str(user.id),
            parent_filter,
            skip,
            self.page_size,
        )
        return [FileResponse.from_record(record) for record in records]

    async def show_file(self, user: User | None, file_id) -> FileResponse:
        """
        Return one of the user's files.

        Raises:
            AuthenticationError: If ``user`` is None
            NotFoundError: If no file with that id belongs to the user
        """
        if user is None:
            raise AuthenticationError()

        record_id = parse_record_id(file_id)
        if record_id is None:
            raise NotFoundError()

        record = await run_in_threadpool(self.files.find_owned, record_id, str(user.id))
        if record is None:
            raise NotFoundError()
        return FileResponse.from_record(record)

    def _validate_upload(self, payload: FileUploadRequest) -> None:
        # Fields arrive untyped; anything that is not a non-empty string counts as missing
        if not isinstance(payload.name, str) or not payload.name:
            raise ValidationError("Missing name")
        if not isinstance(payload.type, str) or payload.type not in FileType.values():
            raise ValidationError("Missing type")
        if payload.type != FileType.FOLDER.value:
            if not isinstance(payload.data, str) or not payload.data:
                raise ValidationError("Missing data")

    async def _resolve_parent(self, value) -> int:
        """Return the parent id to store, checking that it names a folder."""
        if value in _ROOT_VALUES:
            return ROOT_PARENT_ID

        parent_id = parse_record_id(value)
        if parent_id is None:
            raise ValidationError("Parent not found")

        parent = await run_in_threadpool(self.files.find_by_id, parent_id)
        if parent is None:
            raise ValidationError("Parent not found")
        if not parent.is_folder:
            raise ValidationError("Parent is not a folder")
        return parent_id

    async def _discard_content(self, path: str) -> None:
        try:
            await self.writer.delete(path)
        except StorageError as e:
            logger.error(f"Could not remove orphaned content at {path}: {str(e)}")
