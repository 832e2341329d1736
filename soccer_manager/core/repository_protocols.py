"""Boundary Protocols — contracts between the Team Economy core and its adapters.

Invariants:
    - Core NEVER imports from repositories/, infrastructure/ or api/ (dependency arrows point inward)
    - Keyed lookups raise the matching *NotFoundError; other storage failures raise DatabaseError
    - Repositories never commit: the calling service owns the transaction (UnitOfWork)
    - TeamCache is a capability separate from the store: absent is None, failure is CacheError

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Conditional writes (debit_budget, complete, cancel) return bool instead of raising,
      so the service maps a zero-row outcome onto the right domain error
"""

from datetime import datetime
from typing import Protocol

from soccer_manager.core.domain_types import UserId, TeamId, PlayerId, TransferId
from soccer_manager.core.entities import (
    User, Team, Player, Transfer, TeamSnapshot,
)
from soccer_manager.core.squad_seed import PlayerSeed


class UnitOfWork(Protocol):
    """Transaction boundary. AsyncSession satisfies this structurally."""
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...


class UserRepository(Protocol):
    """Contract for user persistence; users are created by the auth collaborator."""
    async def create(self, email: str, password_hash: str) -> User: ...
    async def get_by_id(self, user_id: UserId) -> User: ...
    async def get_by_email(self, email: str) -> User: ...


class TeamRepository(Protocol):
    """Contract for team persistence."""
    async def create(
        self, user_id: UserId, name: str, country: str, budget: int,
    ) -> Team: ...
    async def get_by_id(self, team_id: TeamId) -> Team: ...
    async def get_by_user_id(self, user_id: UserId) -> Team: ...
    async def update(
        self, team_id: TeamId, name: str | None = None, country: str | None = None,
    ) -> Team: ...
    async def update_total_value(self, team_id: TeamId, total_value: int) -> None: ...
    async def debit_budget(self, team_id: TeamId, amount: int) -> bool: ...
    async def credit_budget(self, team_id: TeamId, amount: int) -> None: ...


class PlayerRepository(Protocol):
    """Contract for player persistence."""
    async def create(self, team_id: TeamId, seed: PlayerSeed) -> Player: ...
    async def get_by_id(self, player_id: PlayerId) -> Player: ...
    async def get_by_team_id(self, team_id: TeamId) -> list[Player]: ...
    async def update(
        self,
        player_id: PlayerId,
        first_name: str | None = None,
        last_name: str | None = None,
        country: str | None = None,
    ) -> Player: ...
    async def update_market_value(self, player_id: PlayerId, market_value: int) -> None: ...
    async def transfer_player(self, player_id: PlayerId, new_team_id: TeamId) -> None: ...


class TransferRepository(Protocol):
    """Contract for transfer persistence."""
    async def create(
        self, player_id: PlayerId, seller_id: TeamId, asking_price: int,
    ) -> Transfer: ...
    async def get_by_id(self, transfer_id: TransferId) -> Transfer: ...
    async def get_active_by_player_id(self, player_id: PlayerId) -> Transfer | None: ...
    async def get_active(self) -> list[Transfer]: ...
    async def complete(
        self, transfer_id: TransferId, buyer_id: TeamId, completed_at: datetime | None = None,
    ) -> bool: ...
    async def cancel(self, transfer_id: TransferId) -> bool: ...


class TeamCache(Protocol):
    """Read-through cache of team snapshots keyed by owning user."""
    async def get(self, user_id: UserId) -> TeamSnapshot | None: ...
    async def set(
        self, user_id: UserId, snapshot: TeamSnapshot, ttl_seconds: int,
    ) -> None: ...
    async def invalidate(self, user_id: UserId) -> None: ...


class LoginAttemptStore(Protocol):
    """Failed-login counter with TTL expiry, consumed by the auth collaborator."""
    async def increment(self, email: str) -> int: ...
    async def get(self, email: str) -> int: ...
    async def reset(self, email: str) -> None: ...
