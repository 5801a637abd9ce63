"""
Post-processing job notification.

The file service announces new images through a ``JobNotifier``. The worker
that consumes the queue (thumbnail generation) runs elsewhere; this side only
publishes ``{"userId": ..., "fileId": ...}`` messages.
"""
import json
from abc import ABC, abstractmethod

from redis.asyncio import Redis

from files_manager.logging_config import setup_logging

logger = setup_logging()


class JobNotifier(ABC):
    """Fire-and-forget publisher for post-processing jobs."""

    @abstractmethod
    async def enqueue(self, user_id: str, file_id: int) -> None:
        """
        Publish a job for a freshly stored file.

        Args:
            user_id: Owner id (string form)
            file_id: Id of the stored file record
        """
        pass


class RedisJobNotifier(JobNotifier):
    """Pushes jobs as JSON onto a Redis list."""

    def __init__(self, redis: Redis, queue_name: str = "fileQueue"):
        self.redis = redis
        self.queue_name = queue_name

    async def enqueue(self, user_id: str, file_id: int) -> None:
        message = json.dumps({"userId": user_id, "fileId": file_id})
        await self.redis.rpush(self.queue_name, message)
        logger.info(f"Job queued on {self.queue_name}: file_id={file_id}, user_id={user_id}")


async def notify_safely(notifier: JobNotifier, user_id: str, file_id: int) -> bool:
    """
    Publish a job without letting a failure reach the caller.

    Returns:
        True if the job was published, False if publishing failed
    """
    try:
        await notifier.enqueue(user_id, file_id)
    except Exception as e:
        logger.warning(
            f"Failed to queue post-processing job for file_id={file_id}: {str(e)}",
            exc_info=True,
        )
        return False
    return True
