"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Team is the aggregate root for players; transfers reference players and teams

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from soccer_manager.models.user import User  # noqa: F401
from soccer_manager.models.team import Team  # noqa: F401
from soccer_manager.models.player import Player  # noqa: F401
from soccer_manager.models.transfer import Transfer  # noqa: F401
