"""Cache Guard — best-effort wrappers around the TeamCache protocol.

Invariants:
    - Never raise CacheError: a failed get is a miss, a failed set/invalidate is a no-op
    - A None cache behaves like an always-empty cache
"""

import logging

from soccer_manager.core.domain_types import UserId
from soccer_manager.core.entities import TeamSnapshot
from soccer_manager.core.errors import CacheError
from soccer_manager.core.repository_protocols import TeamCache

logger = logging.getLogger(__name__)


async def cached_snapshot(cache: TeamCache | None, user_id: UserId) -> TeamSnapshot | None:
    if cache is None:
        return None
    try:
        return await cache.get(user_id)
    except CacheError as e:
        logger.warning(
            f"Team cache read failed, falling back to store: {e.message}",
            extra={"user_id": user_id, "error_code": e.code},
        )
        return None


async def store_snapshot(
    cache: TeamCache | None, user_id: UserId, snapshot: TeamSnapshot, ttl_seconds: int,
) -> None:
    if cache is None:
        return
    try:
        await cache.set(user_id, snapshot, ttl_seconds)
    except CacheError as e:
        logger.warning(
            f"Team cache write failed: {e.message}",
            extra={"user_id": user_id, "error_code": e.code},
        )


async def invalidate_snapshot(cache: TeamCache | None, user_id: UserId) -> None:
    if cache is None:
        return
    try:
        await cache.invalidate(user_id)
    except CacheError as e:
        logger.warning(
            f"Team cache invalidation failed: {e.message}",
            extra={"user_id": user_id, "error_code": e.code},
        )
