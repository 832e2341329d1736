"""Team ORM — budget and aggregate value for one user's club.

Invariants:
    - user_id is unique (one team per user)
    - budget and total_value are whole currency units (BigInteger)
    - total_value is derived from the roster and corrected lazily on read

Design Decisions:
    - total_value stored (not computed in SQL): cached snapshots and listings read it
      without aggregating players on every request
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, BigInteger, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from soccer_manager.db.base import Base


class Team(Base):
    """Team aggregate root — owns its roster."""
    __tablename__ = "teams"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    country: Mapped[str] = mapped_column(String(50), nullable=False)
    budget: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    total_value: Mapped[int] = mapped_column(BigInteger, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="team")
    players: Mapped[list["Player"]] = relationship(
        "Player", back_populates="team",
    )
