"""Player Repository — roster reads, profile edits, and ownership moves.

Invariants:
    - get_by_team_id orders by position, then last name (first name and id break ties)
    - transfer_player is the only write that changes team_id
"""

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.core.domain_types import TeamId, PlayerId, PlayerPosition
from soccer_manager.core.entities import Player
from soccer_manager.core.errors import PlayerNotFoundError
from soccer_manager.core.squad_seed import PlayerSeed
from soccer_manager.infrastructure.database import map_db_errors
from soccer_manager.models.player import Player as PlayerModel


def _to_entity(row: PlayerModel) -> Player:
    return Player(
        id=PlayerId(row.id),
        team_id=TeamId(row.team_id),
        first_name=row.first_name,
        last_name=row.last_name,
        country=row.country,
        age=row.age,
        position=PlayerPosition(row.position),
        market_value=row.market_value,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class PlayerSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, team_id: TeamId, seed: PlayerSeed) -> Player:
        with map_db_errors("players.create"):
            row = PlayerModel(
                team_id=team_id,
                first_name=seed.first_name,
                last_name=seed.last_name,
                country=seed.country,
                age=seed.age,
                position=seed.position.value,
                market_value=seed.market_value,
            )
            self.db.add(row)
            await self.db.flush()
            return _to_entity(row)

    async def _get_row(self, player_id: PlayerId) -> PlayerModel:
        with map_db_errors("players.get_by_id"):
            result = await self.db.execute(
                select(PlayerModel)
                .where(PlayerModel.id == player_id)
                .execution_options(populate_existing=True),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise PlayerNotFoundError(player_id)
        return row

    async def get_by_id(self, player_id: PlayerId) -> Player:
        return _to_entity(await self._get_row(player_id))

    async def get_by_team_id(self, team_id: TeamId) -> list[Player]:
        with map_db_errors("players.get_by_team_id"):
            result = await self.db.execute(
                select(PlayerModel)
                .where(PlayerModel.team_id == team_id)
                .order_by(
                    PlayerModel.position.asc(),
                    PlayerModel.last_name.asc(),
                    PlayerModel.first_name.asc(),
                    PlayerModel.id.asc(),
                )
                .execution_options(populate_existing=True),
            )
            return [_to_entity(row) for row in result.scalars().all()]

    async def update(
        self,
        player_id: PlayerId,
        first_name: str | None = None,
        last_name: str | None = None,
        country: str | None = None,
    ) -> Player:
        row = await self._get_row(player_id)
        with map_db_errors("players.update"):
            if first_name:
                row.first_name = first_name
            if last_name:
                row.last_name = last_name
            if country:
                row.country = country
            row.updated_at = datetime.now(timezone.utc)
            await self.db.flush()
        return _to_entity(row)

    async def update_market_value(self, player_id: PlayerId, market_value: int) -> None:
        await self._update(player_id, "players.update_market_value", market_value=market_value)

    async def transfer_player(self, player_id: PlayerId, new_team_id: TeamId) -> None:
        await self._update(player_id, "players.transfer_player", team_id=new_team_id)

    async def _update(self, player_id: PlayerId, operation: str, **values) -> None:
        with map_db_errors(operation):
            result = await self.db.execute(
                update(PlayerModel)
                .where(PlayerModel.id == player_id)
                .values(updated_at=datetime.now(timezone.utc), **values)
                .execution_options(synchronize_session=False),
            )
        if result.rowcount == 0:
            raise PlayerNotFoundError(player_id)
