from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database settings
    DATABASE_URL: str = "sqlite:///./files_manager.db"

    # Cache / queue settings
    REDIS_URL: str = "redis://127.0.0.1:6379/0"
    AUTH_TOKEN_TTL_SECONDS: int = 24 * 60 * 60
    JOB_QUEUE_NAME: str = "fileQueue"

    # Storage settings
    FOLDER_PATH: str = "/tmp/files_manager"

    # Listing settings
    FILES_PAGE_SIZE: int = 20

    # Values come from the process environment first, then from .env.
    # Keys in .env that are not declared above are ignored.
    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
