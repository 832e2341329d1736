"""SQL Repositories — SQLAlchemy implementations of core/repository_protocols.py.

Invariants:
    - Every repository works on an injected AsyncSession and only flushes
    - Rows are converted to core entities before leaving the repository
    - Reads use populate_existing so conditional UPDATEs in the same session are visible

Design Decisions:
    - One file per aggregate, mirroring models/
"""

from soccer_manager.repositories.user_repository import UserSqlRepository  # noqa: F401
from soccer_manager.repositories.team_repository import TeamSqlRepository  # noqa: F401
from soccer_manager.repositories.player_repository import PlayerSqlRepository  # noqa: F401
from soccer_manager.repositories.transfer_repository import TransferSqlRepository  # noqa: F401
