"""
Session endpoints.

``/connect`` trades HTTP Basic credentials for an opaque token; the token is
then sent in the ``X-Token`` header until ``/disconnect`` revokes it or it
expires.
"""
from fastapi import APIRouter, Depends, Response, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from redis.asyncio import Redis
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.dependencies.auth import get_session_resolver, token_header
from files_manager.dependencies.clients import get_cache
from files_manager.exceptions import AuthenticationError
from files_manager.repositories.users import UserRepository
from files_manager.schemas.common import ErrorResponse
from files_manager.schemas.users import TokenResponse
from files_manager.services.auth import authenticate, issue_token, revoke_token
from files_manager.services.session import SessionResolver

router = APIRouter(tags=["auth"])

basic_auth = HTTPBasic(auto_error=False)


@router.get(
    "/connect",
    response_model=TokenResponse,
    responses={401: {"model": ErrorResponse}},
)
async def connect(
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    cache: Redis = Depends(get_cache),
    db: Session = Depends(get_db),
):
    if credentials is None:
        raise AuthenticationError()

    user = await authenticate(UserRepository(db), credentials.username, credentials.password)
    token = await issue_token(cache, user)
    return TokenResponse(token=token)


@router.get(
    "/disconnect",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"model": ErrorResponse}},
)
async def disconnect(
    token: str | None = Depends(token_header),
    resolver: SessionResolver = Depends(get_session_resolver),
    cache: Redis = Depends(get_cache),
):
    user = await resolver.resolve(token)
    if user is None:
        raise AuthenticationError()

    await revoke_token(cache, token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
