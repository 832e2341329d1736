"""API Dependencies — acting-user resolution and per-request service wiring.

Invariants:
    - The acting user comes only from the X-User-Id header set by the auth gateway
    - Missing or malformed X-User-Id → 401, before any service runs
    - Team cache absent (Redis not initialized) → services run uncached

Design Decisions:
    - One process-wide random.Random: purchases and squads draw from it, tests override it
"""

import random
from uuid import UUID

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.config import Settings, get_settings
from soccer_manager.core.domain_types import UserId
from soccer_manager.core.repository_protocols import TeamCache
from soccer_manager.infrastructure import redis_client
from soccer_manager.infrastructure.database import get_db
from soccer_manager.infrastructure.team_cache import RedisTeamCache
from soccer_manager.services.player_service import PlayerService
from soccer_manager.services.provisioning_service import TeamProvisioningService
from soccer_manager.services.service_factory import (
    build_team_service, build_player_service,
    build_transfer_service, build_provisioning_service,
)
from soccer_manager.services.team_service import TeamService
from soccer_manager.services.transfer_service import TransferService

_rng = random.Random()


def get_current_user_id(
    x_user_id: str | None = Header(default=None),
) -> UserId:
    if not x_user_id:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED, detail="Missing X-User-Id header",
        )
    try:
        return UserId(UUID(x_user_id))
    except ValueError:
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED, detail="Invalid X-User-Id header",
        )


def get_rng() -> random.Random:
    return _rng


def get_team_cache(settings: Settings = Depends(get_settings)) -> TeamCache | None:
    if redis_client.redis_client is None:
        return None
    return RedisTeamCache(
        redis_client.redis_client, timeout_seconds=settings.team_cache_timeout_seconds,
    )


def get_team_service(
    db: AsyncSession = Depends(get_db),
    cache: TeamCache | None = Depends(get_team_cache),
    settings: Settings = Depends(get_settings),
) -> TeamService:
    return build_team_service(db, cache, settings)


def get_player_service(
    db: AsyncSession = Depends(get_db),
    cache: TeamCache | None = Depends(get_team_cache),
) -> PlayerService:
    return build_player_service(db, cache)


def get_transfer_service(
    db: AsyncSession = Depends(get_db),
    cache: TeamCache | None = Depends(get_team_cache),
    rng: random.Random = Depends(get_rng),
) -> TransferService:
    return build_transfer_service(db, cache, rng)


def get_provisioning_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    rng: random.Random = Depends(get_rng),
) -> TeamProvisioningService:
    return build_provisioning_service(db, settings, rng)
