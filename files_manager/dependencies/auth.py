from fastapi import Depends
from fastapi.security import APIKeyHeader
from redis.asyncio import Redis
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.dependencies.clients import get_cache
from files_manager.models.user import User
from files_manager.repositories.users import UserRepository
from files_manager.services.session import TOKEN_HEADER, SessionResolver

# Reads the X-Token header. auto_error=False: a missing header is passed on
# as None and each endpoint decides how to report it.
token_header = APIKeyHeader(name=TOKEN_HEADER, auto_error=False)


def get_session_resolver(
    cache: Redis = Depends(get_cache),
    db: Session = Depends(get_db),
) -> SessionResolver:
    return SessionResolver(cache, UserRepository(db))


async def get_optional_user(
    token: str | None = Depends(token_header),
    resolver: SessionResolver = Depends(get_session_resolver),
) -> User | None:
    """Authenticated user for the request, or None."""
    return await resolver.resolve(token)
