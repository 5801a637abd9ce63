import os

# Must be set before files_manager.config is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from files_manager.database import Base, build_engine, get_db
from files_manager.dependencies.clients import get_cache, get_notifier
from files_manager.dependencies.storage import get_storage
from files_manager.main import app
from files_manager.services.jobs import JobNotifier
from files_manager.storage.local import LocalContentWriter


class FakeRedis:
    """
    In-memory double for the redis.asyncio commands the app uses.

    Values are kept as strings, like a client created with
    ``decode_responses=True``. Expiry is recorded but not enforced.
    """

    def __init__(self):
        self.values: dict[str, str] = {}
        self.ttls: dict[str, int | None] = {}
        self.lists: dict[str, list[str]] = {}

    async def get(self, name):
        return self.values.get(name)

    async def set(self, name, value, ex=None):
        self.values[name] = str(value)
        self.ttls[name] = ex
        return True

    async def delete(self, *names):
        removed = 0
        for name in names:
            if self.values.pop(name, None) is not None:
                removed += 1
            self.ttls.pop(name, None)
        return removed

    async def rpush(self, name, *values):
        queue = self.lists.setdefault(name, [])
        queue.extend(values)
        return len(queue)

    async def ping(self):
        return True


class RecordingNotifier(JobNotifier):
    """Job notifier that remembers every job, or fails on demand."""

    def __init__(self, fail: bool = False):
        self.jobs: list[tuple[str, int]] = []
        self.fail = fail

    async def enqueue(self, user_id: str, file_id: int) -> None:
        if self.fail:
            raise ConnectionError("queue unavailable")
        self.jobs.append((user_id, file_id))


@pytest.fixture
def db(tmp_path):
    """Each test gets its own SQLite database file."""
    engine = build_engine(f"sqlite:///{tmp_path / 'test.db'}")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine, autocommit=False, autoflush=False)()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def cache():
    return FakeRedis()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def storage_root(tmp_path):
    """Content root; deliberately not created so tests can check it appears."""
    return tmp_path / "files_manager"


@pytest.fixture
def client(db, cache, notifier, storage_root):
    """Test client with database, cache, notifier and storage overrides."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: cache
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_storage] = lambda: LocalContentWriter(base_path=str(storage_root))
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
