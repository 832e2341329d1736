"""Player Service — player metadata updates.

Invariants:
    - Only non-empty fields are written
    - The acting user's cached snapshot is invalidated after commit

Design Decisions:
    - No ownership check on update: any authenticated user may rename any player,
      matching the existing public API; listing and buying are the guarded operations
"""

import logging

from soccer_manager.core.domain_types import UserId, PlayerId
from soccer_manager.core.entities import Player
from soccer_manager.core.repository_protocols import (
    UnitOfWork, PlayerRepository, TeamCache,
)
from soccer_manager.services.cache_guard import invalidate_snapshot

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(
        self, db: UnitOfWork, players: PlayerRepository, cache: TeamCache | None = None,
    ):
        self.db = db
        self.players = players
        self.cache = cache

    async def update_player(
        self,
        user_id: UserId,
        player_id: PlayerId,
        first_name: str | None = None,
        last_name: str | None = None,
        country: str | None = None,
    ) -> Player:
        try:
            player = await self.players.update(
                player_id, first_name=first_name, last_name=last_name, country=country,
            )
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise
        logger.info("Player updated", extra={"user_id": user_id, "player_id": player_id})
        await invalidate_snapshot(self.cache, user_id)
        return player
