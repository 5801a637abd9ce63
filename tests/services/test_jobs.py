"""
Tests for the post-processing job notifier.
"""
import json

import pytest

from files_manager.services.jobs import RedisJobNotifier, notify_safely


@pytest.mark.asyncio
async def test_redis_notifier_pushes_json_message(cache):
    notifier = RedisJobNotifier(cache, "fileQueue")

    await notifier.enqueue("7", 42)

    assert [json.loads(m) for m in cache.lists["fileQueue"]] == [{"userId": "7", "fileId": 42}]


@pytest.mark.asyncio
async def test_notify_safely_reports_success(notifier):
    assert await notify_safely(notifier, "7", 42) is True
    assert notifier.jobs == [("7", 42)]


@pytest.mark.asyncio
async def test_notify_safely_swallows_failure(notifier):
    notifier.fail = True

    assert await notify_safely(notifier, "7", 42) is False
    assert notifier.jobs == []
