"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, TeamId, PlayerId, TransferId wrap UUIDs — never use bare UUID in domain logic
    - Money is whole currency units (int), never float
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to DB string columns without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
TeamId = NewType("TeamId", UUID)
PlayerId = NewType("PlayerId", UUID)
TransferId = NewType("TransferId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", int)                 # whole currency units
AppreciationPercent = NewType("AppreciationPercent", int)   # 10–100


# ─── Enums ───────────────────────────────────────────────────────

class PlayerPosition(str, Enum):
    """Squad positions — maps to DB `position` column."""
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    ATTACKER = "attacker"


class TransferStatus(str, Enum):
    """Transfer lifecycle. COMPLETED and CANCELLED are terminal."""
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not TransferStatus.ACTIVE
