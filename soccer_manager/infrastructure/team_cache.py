"""Team Cache — Redis read-through cache of team snapshots keyed by owning user.

Invariants:
    - Keys are team_cache:{user_id}; values are JSON-encoded TeamSnapshot
    - get() returns None on a miss, raises CacheError on any failure
    - Every call is bounded by timeout_seconds; a timeout is a CacheError, never a hang
    - Undecodable payloads are reported as CacheError (callers treat them as a miss)

Design Decisions:
    - pydantic TypeAdapter over hand-written (de)serialization: core dataclasses stay
      validation-free while UUIDs, enums and datetimes round-trip exactly
"""

import asyncio
import logging

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from redis.asyncio import Redis
from redis.exceptions import RedisError

from soccer_manager.core.domain_types import UserId
from soccer_manager.core.entities import TeamSnapshot
from soccer_manager.core.errors import CacheError

logger = logging.getLogger(__name__)

_snapshot_adapter = TypeAdapter(TeamSnapshot)


def team_cache_key(user_id: UserId) -> str:
    return f"team_cache:{user_id}"


class RedisTeamCache:
    """TeamCache implementation over redis.asyncio."""

    def __init__(self, client: Redis, timeout_seconds: float = 0.25):
        self.client = client
        self.timeout_seconds = timeout_seconds

    async def _call(self, operation: str, user_id: UserId, awaitable):
        try:
            return await asyncio.wait_for(awaitable, timeout=self.timeout_seconds)
        except asyncio.TimeoutError as e:
            raise CacheError("timed out", operation) from e
        except (RedisError, OSError) as e:
            logger.error(
                f"Team cache {operation} failed: {e}",
                extra={"user_id": user_id, "operation": operation},
            )
            raise CacheError(str(e), operation) from e

    async def get(self, user_id: UserId) -> TeamSnapshot | None:
        data = await self._call("get", user_id, self.client.get(team_cache_key(user_id)))
        if data is None:
            logger.debug("Team not found in cache", extra={"user_id": user_id})
            return None
        try:
            return _snapshot_adapter.validate_json(data)
        except ValidationError as e:
            raise CacheError(f"undecodable snapshot: {e.error_count()} errors", "decode") from e

    async def set(
        self, user_id: UserId, snapshot: TeamSnapshot, ttl_seconds: int,
    ) -> None:
        try:
            payload = _snapshot_adapter.dump_json(snapshot)
        except PydanticSerializationError as e:
            raise CacheError(f"unencodable snapshot: {e}", "encode") from e
        await self._call(
            "set", user_id,
            self.client.set(team_cache_key(user_id), payload, ex=ttl_seconds),
        )

    async def invalidate(self, user_id: UserId) -> None:
        await self._call("invalidate", user_id, self.client.delete(team_cache_key(user_id)))
