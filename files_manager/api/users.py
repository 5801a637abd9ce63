from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.dependencies.auth import get_optional_user
from files_manager.exceptions import AuthenticationError
from files_manager.models.user import User
from files_manager.repositories.users import UserRepository
from files_manager.schemas.common import ErrorResponse
from files_manager.schemas.users import UserRegisterRequest, UserResponse
from files_manager.services.auth import register_user

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_user(request: UserRegisterRequest, db: Session = Depends(get_db)):
    user = await register_user(UserRepository(db), request.email, request.password)
    return UserResponse.model_validate(user)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={401: {"model": ErrorResponse}},
)
async def get_me(user: User | None = Depends(get_optional_user)):
    if user is None:
        raise AuthenticationError()
    return UserResponse.model_validate(user)
