"""Team Repository — team reads, partial updates, and budget movements.

Invariants:
    - get_by_* raise TeamNotFoundError on a miss
    - debit_budget is conditional on budget >= amount; returns False when no row changed
    - Budget movements are relative (budget = budget +/- amount) so concurrent
      transactions never overwrite each other's balance
"""

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.core.domain_types import UserId, TeamId
from soccer_manager.core.entities import Team
from soccer_manager.core.errors import TeamNotFoundError, TeamAlreadyExistsError
from soccer_manager.infrastructure.database import map_db_errors
from soccer_manager.models.team import Team as TeamModel


def _to_entity(row: TeamModel) -> Team:
    return Team(
        id=TeamId(row.id),
        user_id=UserId(row.user_id),
        name=row.name,
        country=row.country,
        budget=row.budget,
        total_value=row.total_value,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class TeamSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, user_id: UserId, name: str, country: str, budget: int,
    ) -> Team:
        with map_db_errors("teams.create"):
            row = TeamModel(
                user_id=user_id, name=name, country=country,
                budget=budget, total_value=0,
            )
            self.db.add(row)
            try:
                await self.db.flush()
            except IntegrityError as e:
                raise TeamAlreadyExistsError(user_id) from e
            return _to_entity(row)

    async def _get_row(self, *criteria, key: object) -> TeamModel:
        with map_db_errors("teams.get"):
            result = await self.db.execute(
                select(TeamModel)
                .where(*criteria)
                .execution_options(populate_existing=True),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise TeamNotFoundError(key)
        return row

    async def get_by_id(self, team_id: TeamId) -> Team:
        return _to_entity(await self._get_row(TeamModel.id == team_id, key=team_id))

    async def get_by_user_id(self, user_id: UserId) -> Team:
        row = await self._get_row(TeamModel.user_id == user_id, key=f"user:{user_id}")
        return _to_entity(row)

    async def update(
        self, team_id: TeamId, name: str | None = None, country: str | None = None,
    ) -> Team:
        """Write only non-empty fields; updated_at always moves."""
        row = await self._get_row(TeamModel.id == team_id, key=team_id)
        with map_db_errors("teams.update"):
            if name:
                row.name = name
            if country:
                row.country = country
            row.updated_at = datetime.now(timezone.utc)
            await self.db.flush()
        return _to_entity(row)

    async def update_total_value(self, team_id: TeamId, total_value: int) -> None:
        with map_db_errors("teams.update_total_value"):
            result = await self.db.execute(
                update(TeamModel)
                .where(TeamModel.id == team_id)
                .values(
                    total_value=total_value,
                    updated_at=datetime.now(timezone.utc),
                )
                .execution_options(synchronize_session=False),
            )
        if result.rowcount == 0:
            raise TeamNotFoundError(team_id)

    async def debit_budget(self, team_id: TeamId, amount: int) -> bool:
        with map_db_errors("teams.debit_budget"):
            result = await self.db.execute(
                update(TeamModel)
                .where(TeamModel.id == team_id, TeamModel.budget >= amount)
                .values(
                    budget=TeamModel.budget - amount,
                    updated_at=datetime.now(timezone.utc),
                )
                .execution_options(synchronize_session=False),
            )
        return result.rowcount > 0

    async def credit_budget(self, team_id: TeamId, amount: int) -> None:
        with map_db_errors("teams.credit_budget"):
            result = await self.db.execute(
                update(TeamModel)
                .where(TeamModel.id == team_id)
                .values(
                    budget=TeamModel.budget + amount,
                    updated_at=datetime.now(timezone.utc),
                )
                .execution_options(synchronize_session=False),
            )
        if result.rowcount == 0:
            raise TeamNotFoundError(team_id)
