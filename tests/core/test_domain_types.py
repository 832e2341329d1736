"""Domain Types — verifies identity wrappers and enum values.

Tests:
    - NewType wrappers are transparent over UUID/int
    - PlayerPosition and TransferStatus values match the DB strings
    - Only ACTIVE is non-terminal
"""

from uuid import uuid4

from soccer_manager.core.domain_types import (
    UserId, TeamId, PlayerId, TransferId, Money,
    PlayerPosition, TransferStatus,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert TeamId(uid) == uid
    assert PlayerId(uid) == uid
    assert TransferId(uid) == uid


def test_money_wraps_int():
    assert Money(5_000_000) == 5_000_000


def test_player_position_has_four_positions():
    assert {p.value for p in PlayerPosition} == {
        "goalkeeper", "defender", "midfielder", "attacker",
    }


def test_transfer_status_values():
    assert TransferStatus("active") is TransferStatus.ACTIVE
    assert TransferStatus.COMPLETED.value == "completed"
    assert TransferStatus.CANCELLED.value == "cancelled"


def test_only_active_is_non_terminal():
    assert not TransferStatus.ACTIVE.is_terminal
    assert TransferStatus.COMPLETED.is_terminal
    assert TransferStatus.CANCELLED.is_terminal
