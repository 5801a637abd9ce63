from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from redis.asyncio import Redis
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from files_manager.database import get_db
from files_manager.dependencies.clients import get_cache
from files_manager.logging_config import setup_logging
from files_manager.repositories.files import FileRepository
from files_manager.repositories.users import UserRepository
from files_manager.schemas.app_status import StatsResponse, StatusResponse

router = APIRouter(tags=["status"])

logger = setup_logging()


async def _redis_alive(cache: Redis) -> bool:
    try:
        return bool(await cache.ping())
    except (RedisError, OSError) as e:
        logger.warning(f"Redis health check failed: {str(e)}")
        return False


def _db_alive(db: Session) -> bool:
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {str(e)}")
        return False
    return True


@router.get("/status", response_model=StatusResponse)
async def get_status(cache: Redis = Depends(get_cache), db: Session = Depends(get_db)):
    return StatusResponse(
        redis=await _redis_alive(cache),
        db=await run_in_threadpool(_db_alive, db),
    )


@router.get("/stats", response_model=StatsResponse)
async def get_stats(db: Session = Depends(get_db)):
    return StatsResponse(
        users=await run_in_threadpool(UserRepository(db).count),
        files=await run_in_threadpool(FileRepository(db).count),
    )
