"""
Data access for users and file metadata.

Repositories wrap a SQLAlchemy ``Session`` and expose the handful of queries
the services need. They are synchronous; async callers go through
``run_in_threadpool``.
"""
from files_manager.repositories.files import FileRepository
from files_manager.repositories.users import UserRepository

__all__ = ["FileRepository", "UserRepository"]
