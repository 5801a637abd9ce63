"""
Files API endpoints.

Upload, listing and show for the authenticated user's files and folders.

Listing and show answer a failed authentication with status 200 and an
``{"error": "Unauthorized"}`` body, while upload answers it with 401.
Existing clients depend on that difference, so it is kept.
"""
from fastapi import APIRouter, BackgroundTasks, Body, Depends, Query, status
from fastapi.responses import JSONResponse

from files_manager.dependencies.auth import get_optional_user
from files_manager.dependencies.services import get_file_service
from files_manager.exceptions import AuthenticationError
from files_manager.models.user import User
from files_manager.schemas.common import ErrorResponse
from files_manager.schemas.files import FileResponse, FileShowResponse, FileUploadRequest
from files_manager.services.files import FileService

router = APIRouter(prefix="/files", tags=["files"])


def _unauthorized_ok(exc: AuthenticationError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content={"error": exc.message})


@router.post(
    "",
    response_model=FileResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
async def upload_file(
    background_tasks: BackgroundTasks,
    payload: FileUploadRequest | None = Body(None),
    user: User | None = Depends(get_optional_user),
    service: FileService = Depends(get_file_service),
):
    """
    Upload a file, an image or create a folder.

    Body fields: ``name``, ``type`` (folder | file | image), ``parentId``
    (default 0, the root), ``isPublic`` (default false) and ``data`` (base64,
    required unless ``type`` is folder).

    Images are announced to the post-processing queue after the response has
    been sent.

    Returns:
        The created record (201)

    Raises:
        AuthenticationError 401: Missing or invalid X-Token
        ValidationError 400: First failing input rule
    """
    return await service.upload(
        user,
        payload or FileUploadRequest(),
        schedule=background_tasks.add_task,
    )


@router.get(
    "",
    response_model=list[FileResponse],
    status_code=status.HTTP_200_OK,
)
async def list_files(
    parent_id: str | None = Query(None, alias="parentId"),
    page: str | None = Query(None),
    user: User | None = Depends(get_optional_user),
    service: FileService = Depends(get_file_service),
):
    """
    List the user's files, 20 per page, optionally inside one folder.
    """
    try:
        return await service.list_files(user, parent_id, page)
    except AuthenticationError as e:
        return _unauthorized_ok(e)


@router.get(
    "/{file_id}",
    response_model=FileShowResponse,
    status_code=status.HTTP_200_OK,
    responses={404: {"model": ErrorResponse}},
)
async def show_file(
    file_id: str,
    user: User | None = Depends(get_optional_user),
    service: FileService = Depends(get_file_service),
):
    """
    Get one of the user's files by id.

    Raises:
        NotFoundError 404: Unknown id or a file owned by someone else
    """
    try:
        record = await service.show_file(user, file_id)
    except AuthenticationError as e:
        return _unauthorized_ok(e)
    return FileShowResponse(file=record)
