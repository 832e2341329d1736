"""Redis Client — process-wide async client for the team cache and login limiter.

Invariants:
    - Single client per process (initialized via init_redis in the lifespan)
    - Socket timeouts bounded so a dead Redis never stalls a request

Design Decisions:
    - redis.asyncio (redis-py) rather than a wrapper: the cache needs only GET/SET/DEL/INCR
    - Mirrors infrastructure/database.py: module singleton set up by the lifespan
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)

redis_client: Redis | None = None


def init_redis(redis_url: str, socket_timeout: float = 1.0) -> Redis:
    global redis_client
    redis_client = Redis.from_url(
        redis_url,
        socket_timeout=socket_timeout,
        socket_connect_timeout=socket_timeout,
        decode_responses=True,
    )
    return redis_client


async def close_redis() -> None:
    global redis_client
    if redis_client is not None:
        await redis_client.aclose()
        redis_client = None


async def redis_health_check() -> bool:
    """Ping Redis (for readiness probes)."""
    if redis_client is None:
        return False
    try:
        return bool(await redis_client.ping())
    except (RedisError, OSError) as e:
        logger.error(f"Redis health check failed: {e}")
        return False

