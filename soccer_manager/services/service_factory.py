"""Service Factory — wire SQL repositories and the team cache into services.

Invariants:
    - All repositories of one service share the request's AsyncSession,
      which doubles as the service's UnitOfWork
"""

import random

from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.config import Settings
from soccer_manager.core.repository_protocols import TeamCache
from soccer_manager.repositories import (
    UserSqlRepository, TeamSqlRepository, PlayerSqlRepository, TransferSqlRepository,
)
from soccer_manager.services.team_service import TeamService
from soccer_manager.services.player_service import PlayerService
from soccer_manager.services.transfer_service import TransferService
from soccer_manager.services.provisioning_service import TeamProvisioningService


def build_team_service(
    db: AsyncSession, cache: TeamCache | None, settings: Settings,
) -> TeamService:
    return TeamService(
        db, TeamSqlRepository(db), PlayerSqlRepository(db),
        cache=cache, cache_ttl_seconds=settings.team_cache_ttl_seconds,
    )


def build_player_service(db: AsyncSession, cache: TeamCache | None) -> PlayerService:
    return PlayerService(db, PlayerSqlRepository(db), cache=cache)


def build_transfer_service(
    db: AsyncSession, cache: TeamCache | None, rng: random.Random,
) -> TransferService:
    return TransferService(
        db, TeamSqlRepository(db), PlayerSqlRepository(db), TransferSqlRepository(db),
        cache=cache, rng=rng,
    )


def build_provisioning_service(
    db: AsyncSession, settings: Settings, rng: random.Random,
) -> TeamProvisioningService:
    return TeamProvisioningService(
        db, UserSqlRepository(db), TeamSqlRepository(db), PlayerSqlRepository(db),
        initial_budget=settings.initial_budget,
        initial_player_value=settings.initial_player_value,
        rng=rng,
    )
