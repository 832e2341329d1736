"""Transfer Repository — listings and their conditional status transitions.

Invariants:
    - complete() and cancel() only touch rows whose status is still 'active'
      and report whether a row changed (the optimistic-concurrency signal)
    - get_active() is ordered newest first
    - A violation of uq_transfers_active_player on create is a PlayerAlreadyListedError
"""

from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from soccer_manager.core.domain_types import (
    TeamId, PlayerId, TransferId, TransferStatus,
)
from soccer_manager.core.entities import Transfer
from soccer_manager.core.errors import TransferNotFoundError, PlayerAlreadyListedError
from soccer_manager.infrastructure.database import map_db_errors
from soccer_manager.models.transfer import Transfer as TransferModel


def _to_entity(row: TransferModel) -> Transfer:
    return Transfer(
        id=TransferId(row.id),
        player_id=PlayerId(row.player_id),
        seller_id=TeamId(row.seller_id),
        buyer_id=TeamId(row.buyer_id) if row.buyer_id else None,
        asking_price=row.asking_price,
        status=TransferStatus(row.status),
        created_at=row.created_at,
        completed_at=row.completed_at,
    )


class TransferSqlRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self, player_id: PlayerId, seller_id: TeamId, asking_price: int,
    ) -> Transfer:
        with map_db_errors("transfers.create"):
            row = TransferModel(
                player_id=player_id,
                seller_id=seller_id,
                asking_price=asking_price,
                status=TransferStatus.ACTIVE.value,
            )
            self.db.add(row)
            try:
                await self.db.flush()
            except IntegrityError as e:
                raise PlayerAlreadyListedError(player_id) from e
            return _to_entity(row)

    async def get_by_id(self, transfer_id: TransferId) -> Transfer:
        with map_db_errors("transfers.get_by_id"):
            result = await self.db.execute(
                select(TransferModel)
                .where(TransferModel.id == transfer_id)
                .execution_options(populate_existing=True),
            )
            row = result.scalar_one_or_none()
        if row is None:
            raise TransferNotFoundError(transfer_id)
        return _to_entity(row)

    async def get_active_by_player_id(self, player_id: PlayerId) -> Transfer | None:
        with map_db_errors("transfers.get_active_by_player_id"):
            result = await self.db.execute(
                select(TransferModel)
                .where(
                    TransferModel.player_id == player_id,
                    TransferModel.status == TransferStatus.ACTIVE.value,
                )
                .execution_options(populate_existing=True),
            )
            row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def get_active(self) -> list[Transfer]:
        with map_db_errors("transfers.get_active"):
            result = await self.db.execute(
                select(TransferModel)
                .where(TransferModel.status == TransferStatus.ACTIVE.value)
                .order_by(TransferModel.created_at.desc(), TransferModel.id.asc())
                .execution_options(populate_existing=True),
            )
            return [_to_entity(row) for row in result.scalars().all()]

    async def complete(
        self, transfer_id: TransferId, buyer_id: TeamId, completed_at: datetime | None = None,
    ) -> bool:
        return await self._transition(
            transfer_id, "transfers.complete",
            status=TransferStatus.COMPLETED.value,
            buyer_id=buyer_id,
            completed_at=completed_at or datetime.now(timezone.utc),
        )

    async def cancel(self, transfer_id: TransferId) -> bool:
        return await self._transition(
            transfer_id, "transfers.cancel",
            status=TransferStatus.CANCELLED.value,
        )

    async def _transition(self, transfer_id: TransferId, operation: str, **values) -> bool:
        with map_db_errors(operation):
            result = await self.db.execute(
                update(TransferModel)
                .where(
                    TransferModel.id == transfer_id,
                    TransferModel.status == TransferStatus.ACTIVE.value,
                )
                .values(**values)
                .execution_options(synchronize_session=False),
            )
        return result.rowcount > 0
