"""Async Session Factory — engines and session factories outside the FastAPI lifespan.

Invariants:
    - Meant for scripts, migrations, and test fixtures
    - In-memory SQLite shares one connection (StaticPool) so every session sees the same schema

Design Decisions:
    - Separate from infrastructure/database.py: this is a convenience for non-FastAPI contexts
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool


def create_engine_for_url(database_url: str, **kwargs) -> AsyncEngine:
    """Create an async engine; in-memory SQLite gets a single shared connection."""
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        kwargs.setdefault("poolclass", StaticPool)
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_async_engine(database_url, echo=False, **kwargs)


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
