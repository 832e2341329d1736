"""Service test fixtures — async DB, seeded teams, cache doubles, FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - Services under test share the test_db session, so assertions read committed state
    - Cache doubles: InMemoryTeamCache records traffic, FailingTeamCache fails every call

Design Decisions:
    - SQLite in-memory: fast, no external dependency; the partial unique index is
      declared for both postgresql and sqlite so listing conflicts behave the same
    - Seeded RNG everywhere: appreciation and squad generation are reproducible
"""

import copy
import random
from dataclasses import dataclass
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from soccer_manager.api.dependencies import get_rng, get_team_cache
from soccer_manager.core.domain_types import UserId, PlayerPosition
from soccer_manager.core.entities import Team, Player, TeamSnapshot
from soccer_manager.core.errors import CacheError
from soccer_manager.core.squad_seed import PlayerSeed
from soccer_manager.db.base import Base
from soccer_manager.db.session import create_engine_for_url, create_session_factory
from soccer_manager.infrastructure.database import get_db
import soccer_manager.models  # noqa: F401
from soccer_manager.repositories import (
    UserSqlRepository, TeamSqlRepository, PlayerSqlRepository, TransferSqlRepository,
)
from soccer_manager.services.player_service import PlayerService
from soccer_manager.services.provisioning_service import TeamProvisioningService
from soccer_manager.services.team_service import TeamService
from soccer_manager.services.transfer_service import TransferService
from soccer_manager.main import app


# ─── Cache doubles ───────────────────────────────────────────────

class InMemoryTeamCache:
    """TeamCache double that keeps deep copies and records invalidations."""

    def __init__(self):
        self.entries: dict[UserId, TeamSnapshot] = {}
        self.ttls: dict[UserId, int] = {}
        self.invalidated: list[UserId] = []
        self.hits = 0

    async def get(self, user_id):
        snapshot = self.entries.get(user_id)
        if snapshot is None:
            return None
        self.hits += 1
        return copy.deepcopy(snapshot)

    async def set(self, user_id, snapshot, ttl_seconds):
        self.entries[user_id] = copy.deepcopy(snapshot)
        self.ttls[user_id] = ttl_seconds

    async def invalidate(self, user_id):
        self.invalidated.append(user_id)
        self.entries.pop(user_id, None)


class FailingTeamCache:
    """TeamCache double whose every call fails like an unreachable Redis."""

    def __init__(self):
        self.calls = 0

    async def get(self, user_id):
        self.calls += 1
        raise CacheError("connection refused", "get")

    async def set(self, user_id, snapshot, ttl_seconds):
        self.calls += 1
        raise CacheError("connection refused", "set")

    async def invalidate(self, user_id):
        self.calls += 1
        raise CacheError("connection refused", "invalidate")


# ─── Database ────────────────────────────────────────────────────

@pytest.fixture
async def test_engine():
    engine = create_engine_for_url("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return create_session_factory(test_engine)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


# ─── Seeding ─────────────────────────────────────────────────────

@dataclass
class SeededTeam:
    user_id: UserId
    team: Team
    players: list[Player]


@pytest.fixture
def make_team(test_db):
    """Factory: user + team with the given budget and one player per market value."""

    async def _make(
        budget: int = 5_000_000,
        values: tuple[int, ...] = (1_000_000,),
        name: str = "Test FC",
        stored_total: int | None = None,
    ) -> SeededTeam:
        user = await UserSqlRepository(test_db).create(f"{uuid4().hex}@example.com", "hash")
        teams = TeamSqlRepository(test_db)
        team = await teams.create(user.id, name, "England", budget)
        players = [
            await PlayerSqlRepository(test_db).create(
                team.id,
                PlayerSeed(
                    first_name=f"First{i}", last_name=f"Last{i:02d}", country="England",
                    age=25, position=PlayerPosition.MIDFIELDER, market_value=value,
                ),
            )
            for i, value in enumerate(values)
        ]
        total = sum(values) if stored_total is None else stored_total
        await teams.update_total_value(team.id, total)
        await test_db.commit()
        return SeededTeam(user_id=user.id, team=await teams.get_by_id(team.id), players=players)

    return _make


# ─── Services ────────────────────────────────────────────────────

@pytest.fixture
def cache():
    return InMemoryTeamCache()


@pytest.fixture
def failing_cache():
    return FailingTeamCache()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def team_service(test_db, cache):
    return TeamService(
        test_db, TeamSqlRepository(test_db), PlayerSqlRepository(test_db),
        cache=cache, cache_ttl_seconds=300,
    )


@pytest.fixture
def player_service(test_db, cache):
    return PlayerService(test_db, PlayerSqlRepository(test_db), cache=cache)


@pytest.fixture
def transfer_service(test_db, cache, rng):
    return TransferService(
        test_db, TeamSqlRepository(test_db), PlayerSqlRepository(test_db),
        TransferSqlRepository(test_db), cache=cache, rng=rng,
    )


@pytest.fixture
def provisioning_service(test_db, rng):
    return TeamProvisioningService(
        test_db, UserSqlRepository(test_db), TeamSqlRepository(test_db),
        PlayerSqlRepository(test_db), rng=rng,
    )


# ─── HTTP ────────────────────────────────────────────────────────

@pytest.fixture
async def client(test_session_factory, cache):
    """FastAPI test client with DB, cache, and RNG dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_team_cache] = lambda: cache
    app.dependency_overrides[get_rng] = lambda: random.Random(99)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
