from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from redis.asyncio import Redis

from files_manager import models  # noqa: F401  (registers tables on Base.metadata)
from files_manager.api.router import router
from files_manager.config import settings
from files_manager.database import Base, engine
from files_manager.exceptions import FilesManagerError
from files_manager.logging_config import setup_logging
from files_manager.services.jobs import RedisJobNotifier
from files_manager.storage.exceptions import StorageError

logger = setup_logging()

_REQUEST_LOCATIONS = ("body", "query", "path", "header", "cookie")


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)

    # One Redis connection pool serves both the session cache and the job queue
    cache = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    app.state.cache = cache
    app.state.notifier = RedisJobNotifier(cache, settings.JOB_QUEUE_NAME)
    logger.info(f"Files manager started, storing content under {settings.FOLDER_PATH}")

    yield

    await cache.aclose()


app = FastAPI(title="Files Manager API", lifespan=lifespan)
app.include_router(router)


@app.exception_handler(FilesManagerError)
async def files_manager_exception_handler(request: Request, exc: FilesManagerError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Flatten HTTPException details into the ``{"error": ...}`` shape."""
    content = exc.detail
    if isinstance(content, dict):
        return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "Unauthorized" if exc.status_code == 401 else str(content)},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed input as a 400 naming the first offending field."""
    field = None
    errors = exc.errors()
    if errors:
        names = [part for part in errors[0].get("loc", ()) if isinstance(part, str)]
        names = [name for name in names if name not in _REQUEST_LOCATIONS]
        if names:
            field = names[0]

    message = f"Invalid {field}" if field else "Invalid request"
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StorageError)
async def storage_exception_handler(request: Request, exc: StorageError):
    logger.error(
        f"Storage failure: {str(exc)}",
        exc_info=True,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    # Full details go to the log only
    logger.error(
        f"Unhandled exception: {exc.__class__.__name__}: {str(exc)}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error"},
    )
