"""Domain Records — plain dataclasses passed across the repository boundary.

Invariants:
    - Repositories return these records, never ORM instances (no lazy loads leak into core)
    - Money fields are int; ids use domain NewTypes
    - TeamSnapshot.players is already ordered for presentation

Design Decisions:
    - dataclasses over Pydantic: core stays free of validation machinery; the cache
      serializes snapshots with a pydantic TypeAdapter at the infrastructure edge
"""

from dataclasses import dataclass, field
from datetime import datetime

from soccer_manager.core.domain_types import (
    UserId, TeamId, PlayerId, TransferId, PlayerPosition, TransferStatus,
)


@dataclass
class User:
    id: UserId
    email: str
    created_at: datetime
    updated_at: datetime


@dataclass
class Team:
    id: TeamId
    user_id: UserId
    name: str
    country: str
    budget: int
    total_value: int
    created_at: datetime
    updated_at: datetime


@dataclass
class Player:
    id: PlayerId
    team_id: TeamId
    first_name: str
    last_name: str
    country: str
    age: int
    position: PlayerPosition
    market_value: int
    created_at: datetime
    updated_at: datetime


@dataclass
class Transfer:
    id: TransferId
    player_id: PlayerId
    seller_id: TeamId
    asking_price: int
    status: TransferStatus
    created_at: datetime
    buyer_id: TeamId | None = None
    completed_at: datetime | None = None


@dataclass
class TeamSnapshot:
    """Denormalized team + roster, the unit stored in the team cache."""
    team: Team
    players: list[Player] = field(default_factory=list)


@dataclass
class TransferListing:
    """One row of the transfer market: listing plus resolved player and seller."""
    transfer: Transfer
    player: Player
    seller_team: Team


@dataclass
class PurchaseResult:
    """Outcome of a completed purchase, as persisted."""
    transfer: Transfer
    player: Player
    buyer_team: Team
    seller_team: Team
    appreciation_percent: int
