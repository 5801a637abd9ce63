"""
Tests for FileService used directly, without the HTTP layer.
"""
import pytest

from files_manager.exceptions import AuthenticationError, NotFoundError, ValidationError
from files_manager.models.file import File
from files_manager.repositories.files import FileRepository
from files_manager.repositories.users import UserRepository
from files_manager.schemas.files import FileUploadRequest
from files_manager.services.files import FileService, decode_payload, parse_page, parse_record_id
from files_manager.storage.local import LocalContentWriter
from tests.helpers import b64


@pytest.fixture
def user(db):
    return UserRepository(db).insert("a@b.com", "hashed")


@pytest.fixture
def files(db):
    return FileRepository(db)


@pytest.fixture
def service(files, storage_root, notifier):
    return FileService(files, LocalContentWriter(base_path=str(storage_root)), notifier, page_size=2)


def test_parse_record_id():
    assert parse_record_id(5) == 5
    assert parse_record_id("12") == 12
    assert parse_record_id("abc") is None
    assert parse_record_id(-1) is None
    assert parse_record_id(True) is None
    assert parse_record_id(None) is None
    assert parse_record_id("\u00b2") is None
    assert parse_record_id(" 7 ") == 7
    assert parse_record_id(2**63 - 1) == 2**63 - 1
    assert parse_record_id(2**63) is None
    assert parse_record_id("9" * 30) is None
    assert parse_record_id(1.5) is None


def test_parse_page():
    assert parse_page(None) == 1
    assert parse_page("3") == 3
    assert parse_page("0") == 1
    assert parse_page("x") == 1
    assert parse_page("\u00b2") == 1
    assert parse_page("9" * 30) == int("9" * 30)


def test_decode_payload():
    assert decode_payload(b64(b"payload")) == b"payload"
    with pytest.raises(ValidationError):
        decode_payload("a")
    with pytest.raises(ValidationError):
        decode_payload("!!!!")
    assert decode_payload("aGVs\nbG8") == b"hello"


@pytest.mark.asyncio
async def test_upload_requires_user(service):
    with pytest.raises(AuthenticationError):
        await service.upload(None, FileUploadRequest(name="a", type="folder"))


@pytest.mark.asyncio
async def test_upload_image_with_scheduler_defers_job(service, user, notifier):
    scheduled = []

    record = await service.upload(
        user,
        FileUploadRequest(name="p.png", type="image", data=b64(b"img")),
        schedule=lambda func, *args: scheduled.append((func, args)),
    )

    # Nothing published until the scheduled job runs
    assert notifier.jobs == []
    assert len(scheduled) == 1
    func, args = scheduled[0]
    await func(*args)
    assert notifier.jobs == [(str(user.id), record.id)]


@pytest.mark.asyncio
async def test_upload_image_without_scheduler_publishes_inline(service, user, notifier):
    record = await service.upload(user, FileUploadRequest(name="p.png", type="image", data=b64(b"img")))

    assert notifier.jobs == [(str(user.id), record.id)]


@pytest.mark.asyncio
async def test_upload_removes_content_when_insert_fails(service, user, files, storage_root, monkeypatch):
    def failing_insert(record):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(files, "insert", failing_insert)

    with pytest.raises(RuntimeError):
        await service.upload(user, FileUploadRequest(name="a.txt", type="file", data=b64(b"abc")))

    assert list(storage_root.iterdir()) == []


@pytest.mark.asyncio
async def test_list_uses_page_size(service, user):
    for i in range(3):
        await service.upload(user, FileUploadRequest(name=f"f{i}", type="folder"))

    assert len(await service.list_files(user)) == 2
    assert len(await service.list_files(user, page=2)) == 1


@pytest.mark.asyncio
async def test_list_requires_user(service):
    with pytest.raises(AuthenticationError):
        await service.list_files(None)


@pytest.mark.asyncio
async def test_show_scoped_to_owner(service, user, db):
    other = UserRepository(db).insert("other@b.com", "hashed")
    record = await service.upload(user, FileUploadRequest(name="docs", type="folder"))

    assert (await service.show_file(user, str(record.id))).name == "docs"
    with pytest.raises(NotFoundError):
        await service.show_file(other, record.id)


@pytest.mark.asyncio
async def test_parent_check_reads_stored_type(service, user, db):
    image = await service.upload(user, FileUploadRequest(name="p.png", type="image", data=b64(b"i")))

    with pytest.raises(ValidationError, match="Parent is not a folder"):
        await service.upload(user, FileUploadRequest(name="x", type="folder", parent_id=image.id))

    assert db.query(File).count() == 1
