"""Root conftest — shared test configuration."""

import os

# Tests never talk to the docker-compose Postgres/Redis
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("LOG_FORMAT", "text")
