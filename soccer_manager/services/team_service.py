"""Team Service — read-through team snapshot and team metadata updates.

Invariants:
    - get_my_team returns the same snapshot with or without a working cache
    - The returned total_value is always the recomputed roster sum
    - A stale stored total is corrected in its own commit; failure to persist it
      is logged and does not fail the read
    - update_team invalidates the acting user's snapshot only after commit
"""

import dataclasses
import logging

from soccer_manager.core.domain_types import UserId
from soccer_manager.core.entities import Team, TeamSnapshot
from soccer_manager.core.errors import SoccerManagerError
from soccer_manager.core.repository_protocols import (
    UnitOfWork, TeamRepository, PlayerRepository, TeamCache,
)
from soccer_manager.core.valuation import needs_revaluation
from soccer_manager.infrastructure.database import map_db_errors
from soccer_manager.services.cache_guard import (
    cached_snapshot, store_snapshot, invalidate_snapshot,
)

logger = logging.getLogger(__name__)


class TeamService:
    def __init__(
        self,
        db: UnitOfWork,
        teams: TeamRepository,
        players: PlayerRepository,
        cache: TeamCache | None = None,
        cache_ttl_seconds: int = 300,
    ):
        self.db = db
        self.teams = teams
        self.players = players
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    async def get_my_team(self, user_id: UserId) -> TeamSnapshot:
        """Team plus ordered roster for the acting user (TeamNotFoundError if none)."""
        snapshot = await cached_snapshot(self.cache, user_id)
        if snapshot is not None:
            logger.debug("Team served from cache", extra={"user_id": user_id})
            return snapshot

        team = await self.teams.get_by_user_id(user_id)
        players = await self.players.get_by_team_id(team.id)
        stale, total = needs_revaluation(team.total_value, players)
        if stale:
            await self._correct_total_value(team, total)
            team = dataclasses.replace(team, total_value=total)

        snapshot = TeamSnapshot(team=team, players=players)
        await store_snapshot(self.cache, user_id, snapshot, self.cache_ttl_seconds)
        return snapshot

    async def _correct_total_value(self, team: Team, total: int) -> None:
        try:
            await self.teams.update_total_value(team.id, total)
            with map_db_errors("teams.commit_total_value"):
                await self.db.commit()
        except SoccerManagerError as e:
            await self._rollback_correction(team)
            logger.warning(
                f"Failed to persist recomputed team value: {e.message}",
                extra={"team_id": team.id, "error_code": e.code},
            )
            return
        logger.info(
            f"Team value corrected {team.total_value} -> {total}",
            extra={"team_id": team.id},
        )

    async def _rollback_correction(self, team: Team) -> None:
        try:
            with map_db_errors("teams.rollback_total_value"):
                await self.db.rollback()
        except SoccerManagerError as e:
            logger.warning(
                f"Rollback after failed value correction also failed: {e.message}",
                extra={"team_id": team.id, "error_code": e.code},
            )

    async def update_team(
        self, user_id: UserId, name: str | None = None, country: str | None = None,
    ) -> Team:
        """Partial update; empty fields are left untouched."""
        team = await self.teams.get_by_user_id(user_id)
        try:
            updated = await self.teams.update(team.id, name=name, country=country)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise
        logger.info("Team updated", extra={"user_id": user_id, "team_id": team.id})
        await invalidate_snapshot(self.cache, user_id)
        return updated
