"""
Session token resolution.

A session is a cache entry ``auth_<token>`` whose value is the user id. The
entry carries its own TTL, so an expired session simply disappears from the
cache.
"""
from fastapi.concurrency import run_in_threadpool
from redis.asyncio import Redis

from files_manager.models.user import User
from files_manager.repositories.users import UserRepository

TOKEN_HEADER = "X-Token"
AUTH_KEY_PREFIX = "auth_"


def auth_key(token: str) -> str:
    return f"{AUTH_KEY_PREFIX}{token}"


class SessionResolver:
    """Map a bearer token to the user it was issued for."""

    def __init__(self, cache: Redis, users: UserRepository):
        self.cache = cache
        self.users = users

    async def resolve(self, token: str | None) -> User | None:
        """
        Return the authenticated user, or None.

        None covers every failure: no token, no cache entry (never issued,
        revoked or expired), a value that is not a user id, and a user that
        no longer exists.
        """
        if not token:
            return None

        cached = await self.cache.get(auth_key(token))
        if not cached:
            return None

        try:
            user_id = int(cached)
        except (TypeError, ValueError):
            return None

        return await run_in_threadpool(self.users.find_by_id, user_id)
