"""Transfer ORM — a listing on the transfer market.

Invariants:
    - status transitions: active -> completed | cancelled (terminal)
    - At most one active row per player (partial unique index uq_transfers_active_player)
    - buyer_id and completed_at are set only on completion
    - asking_price >= 1 (check constraint)

Design Decisions:
    - Partial unique index backs the service-level AlreadyListed check, so a race
      between two listings of the same player still yields one active row
    - Status updates are conditional on status = 'active' (see TransferSqlRepository)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import (
    String, BigInteger, DateTime, ForeignKey, Index, CheckConstraint, text,
)
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from soccer_manager.db.base import Base


class Transfer(Base):
    """Transfer listing entity."""
    __tablename__ = "transfers"
    __table_args__ = (
        CheckConstraint("asking_price >= 1", name="ck_transfers_asking_price_positive"),
        Index(
            "uq_transfers_active_player", "player_id",
            unique=True,
            postgresql_where=text("status = 'active'"),
            sqlite_where=text("status = 'active'"),
        ),
        Index("ix_transfers_status_created_at", "status", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    player_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("players.id"), nullable=False,
    )
    seller_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("teams.id"), nullable=False,
    )
    buyer_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True), ForeignKey("teams.id"), nullable=True,
    )
    asking_price: Mapped[int] = mapped_column(BigInteger, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="active",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
