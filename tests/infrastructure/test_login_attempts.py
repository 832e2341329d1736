"""Redis Login Attempt Store — verifies counter semantics over a mocked client.

Tests:
    - increment runs INCR + EXPIRE(ttl) in one transactional pipeline and returns the count
    - get returns 0 for a missing key, the integer count otherwise
    - reset deletes the key
    - Empty email → ValueError; Redis failures → CacheError
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import RedisError

from soccer_manager.core.errors import CacheError
from soccer_manager.infrastructure.login_attempts import RedisLoginAttemptStore


@pytest.fixture
def pipe():
    pipe = MagicMock()
    pipe.execute = AsyncMock(return_value=[3, True])
    return pipe


@pytest.fixture
def client(pipe):
    client = MagicMock()
    client.pipeline.return_value.__aenter__.return_value = pipe
    client.pipeline.return_value.__aexit__.return_value = False
    client.get = AsyncMock()
    client.delete = AsyncMock()
    return client


async def test_increment_uses_incr_and_expire(client, pipe):
    store = RedisLoginAttemptStore(client, ttl_seconds=900)

    assert await store.increment("a@b.com") == 3
    client.pipeline.assert_called_once_with(transaction=True)
    pipe.incr.assert_called_once_with("login_attempts:a@b.com")
    pipe.expire.assert_called_once_with("login_attempts:a@b.com", 900)


async def test_get_missing_is_zero(client):
    client.get.return_value = None
    assert await RedisLoginAttemptStore(client).get("a@b.com") == 0


async def test_get_returns_count(client):
    client.get.return_value = "4"
    assert await RedisLoginAttemptStore(client).get("a@b.com") == 4


async def test_reset_deletes_key(client):
    await RedisLoginAttemptStore(client).reset("a@b.com")
    client.delete.assert_awaited_once_with("login_attempts:a@b.com")


@pytest.mark.parametrize("method", ["increment", "get", "reset"])
async def test_empty_email_rejected(client, method):
    with pytest.raises(ValueError):
        await getattr(RedisLoginAttemptStore(client), method)("")


async def test_pipeline_failure_becomes_cache_error(client, pipe):
    pipe.execute.side_effect = RedisError("down")
    with pytest.raises(CacheError):
        await RedisLoginAttemptStore(client).increment("a@b.com")


async def test_get_failure_becomes_cache_error(client):
    client.get.side_effect = RedisError("down")
    with pytest.raises(CacheError):
        await RedisLoginAttemptStore(client).get("a@b.com")
