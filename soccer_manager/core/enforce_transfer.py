"""Transfer Market Enforcement — pure listing, purchase, and cancellation rules.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return the error on violation, None on success
    - validate_* chains its checks in workflow order; first error wins

Design Decisions:
    - Return errors (not raise): services decide when to raise, so the rules are
      testable without pytest.raises and can be composed freely
"""

from soccer_manager.core.entities import Player, Team, Transfer
from soccer_manager.core.domain_types import TransferStatus
from soccer_manager.core.errors import (
    SoccerManagerError,
    PlayerNotOwnedError,
    PlayerAlreadyListedError,
    TransferNotActiveError,
    TransferNotOwnedError,
    CannotBuyOwnPlayerError,
    InsufficientFundsError,
    InvalidAskingPriceError,
)

MIN_ASKING_PRICE = 1


# ─── Listing ─────────────────────────────────────────────────────

def check_asking_price(asking_price: int) -> SoccerManagerError | None:
    if asking_price < MIN_ASKING_PRICE:
        return InvalidAskingPriceError(asking_price)
    return None


def check_player_owned(player: Player, team: Team) -> SoccerManagerError | None:
    """Only the owning team may list a player."""
    if player.team_id != team.id:
        return PlayerNotOwnedError(player.id)
    return None


def check_not_listed(
    player: Player, existing: Transfer | None,
) -> SoccerManagerError | None:
    """At most one active transfer per player."""
    if existing is not None and existing.status is TransferStatus.ACTIVE:
        return PlayerAlreadyListedError(player.id)
    return None


def validate_listing(
    player: Player, team: Team, existing: Transfer | None,
) -> SoccerManagerError | None:
    return check_player_owned(player, team) or check_not_listed(player, existing)


# ─── Purchase ────────────────────────────────────────────────────

def check_transfer_active(transfer: Transfer) -> SoccerManagerError | None:
    if transfer.status is not TransferStatus.ACTIVE:
        return TransferNotActiveError(transfer.id)
    return None


def check_not_own_team(buyer: Team, transfer: Transfer) -> SoccerManagerError | None:
    if buyer.id == transfer.seller_id:
        return CannotBuyOwnPlayerError()
    return None


def check_funds(buyer: Team, transfer: Transfer) -> SoccerManagerError | None:
    if buyer.budget < transfer.asking_price:
        return InsufficientFundsError(buyer.budget, transfer.asking_price)
    return None


def validate_purchase(buyer: Team, transfer: Transfer) -> SoccerManagerError | None:
    """Self-purchase is reported before funds, even when both apply."""
    return check_not_own_team(buyer, transfer) or check_funds(buyer, transfer)


# ─── Cancellation ────────────────────────────────────────────────

def validate_cancellation(team: Team, transfer: Transfer) -> SoccerManagerError | None:
    if err := check_transfer_active(transfer):
        return err
    if transfer.seller_id != team.id:
        return TransferNotOwnedError(transfer.id)
    return None
