"""Login Attempt Store — Redis counter of failed logins per email with TTL expiry.

Invariants:
    - increment() is INCR + EXPIRE in one MULTI pipeline: every bump refreshes the window
    - get() returns 0 for an unknown or expired email
    - Empty email is a programming error (ValueError), not a storage failure

Design Decisions:
    - Only the auth collaborator calls this; the Team Economy services never touch it
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from soccer_manager.core.errors import CacheError

logger = logging.getLogger(__name__)


def login_attempts_key(email: str) -> str:
    return f"login_attempts:{email}"


class RedisLoginAttemptStore:
    """LoginAttemptStore implementation over redis.asyncio."""

    def __init__(self, client: Redis, ttl_seconds: int = 900):
        self.client = client
        self.ttl_seconds = ttl_seconds

    async def increment(self, email: str) -> int:
        key = _require_key(email)
        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.incr(key)
                pipe.expire(key, self.ttl_seconds)
                count, _ = await pipe.execute()
        except RedisError as e:
            logger.error(f"Failed to increment login attempts: {e}", extra={"operation": "increment"})
            raise CacheError(str(e), "login_attempts.increment") from e
        return int(count)

    async def get(self, email: str) -> int:
        key = _require_key(email)
        try:
            value = await self.client.get(key)
        except RedisError as e:
            logger.error(f"Failed to get login attempts: {e}", extra={"operation": "get"})
            raise CacheError(str(e), "login_attempts.get") from e
        if value is None:
            return 0
        try:
            return int(value)
        except ValueError as e:
            raise CacheError(f"non-integer counter {value!r}", "login_attempts.get") from e

    async def reset(self, email: str) -> None:
        key = _require_key(email)
        try:
            await self.client.delete(key)
        except RedisError as e:
            logger.error(f"Failed to reset login attempts: {e}", extra={"operation": "reset"})
            raise CacheError(str(e), "login_attempts.reset") from e


def _require_key(email: str) -> str:
    if not email:
        raise ValueError("empty email")
    return login_attempts_key(email)
