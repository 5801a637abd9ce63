from fastapi import APIRouter

from files_manager.api.app_status import router as app_status_router
from files_manager.api.auth import router as auth_router
from files_manager.api.files import router as files_router
from files_manager.api.users import router as users_router

router = APIRouter()
router.include_router(app_status_router)
router.include_router(auth_router)
router.include_router(users_router)
router.include_router(files_router)
