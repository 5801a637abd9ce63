"""
User registration, password hashing and session token issuance.
"""
import uuid

import bcrypt
from fastapi.concurrency import run_in_threadpool
from redis.asyncio import Redis

from files_manager.config import settings
from files_manager.exceptions import AuthenticationError, ValidationError
from files_manager.logging_config import setup_logging
from files_manager.models.user import User
from files_manager.repositories.users import UserRepository
from files_manager.services.session import auth_key

logger = setup_logging()


def hash_password(password: str) -> str:
    # gensalt() gives every hash its own random salt
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode(), hashed_password.encode())


async def register_user(users: UserRepository, email: str | None, password: str | None) -> User:
    """
    Create a user account.

    Raises:
        ValidationError: "Missing email", "Missing password" or "Already exist"
    """
    if not email:
        raise ValidationError("Missing email")
    if not password:
        raise ValidationError("Missing password")

    existing = await run_in_threadpool(users.find_by_email, email)
    if existing:
        raise ValidationError("Already exist")

    # bcrypt is deliberately slow, keep it off the event loop
    hashed = await run_in_threadpool(hash_password, password)
    user = await run_in_threadpool(users.insert, email, hashed)
    if user is None:
        # Lost a race with a concurrent registration for the same email
        raise ValidationError("Already exist")

    logger.info(f"User registered: user_id={user.id}")
    return user


async def authenticate(users: UserRepository, email: str, password: str) -> User:
    """
    Check email/password credentials.

    Raises:
        AuthenticationError: If the user is unknown or the password is wrong
    """
    user = await run_in_threadpool(users.find_by_email, email)
    if not user:
        raise AuthenticationError()

    valid = await run_in_threadpool(verify_password, password, user.hashed_password)
    if not valid:
        raise AuthenticationError()

    return user


async def issue_token(cache: Redis, user: User, ttl_seconds: int | None = None) -> str:
    """Store a new session for ``user`` and return its token."""
    token = str(uuid.uuid4())
    ttl = ttl_seconds or settings.AUTH_TOKEN_TTL_SECONDS
    await cache.set(auth_key(token), str(user.id), ex=ttl)
    logger.info(f"Session opened: user_id={user.id}, ttl={ttl}s")
    return token


async def revoke_token(cache: Redis, token: str) -> None:
    await cache.delete(auth_key(token))
