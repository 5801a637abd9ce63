"""
Client dependencies for FastAPI.

The Redis client and the job notifier are built once in the application
lifespan and kept on ``app.state``; these functions hand them to endpoints.
Tests replace them through ``app.dependency_overrides``.
"""
from fastapi import Request
from redis.asyncio import Redis

from files_manager.services.jobs import JobNotifier


def get_cache(request: Request) -> Redis:
    return request.app.state.cache


def get_notifier(request: Request) -> JobNotifier:
    return request.app.state.notifier
