"""Transfer Market Enforcement — verifies pure listing, purchase, and cancel rules.

Tests:
    - Asking price must be >= 1
    - Listing: foreign player → PlayerNotOwnedError, active listing → PlayerAlreadyListedError
    - Purchase: own listing → CannotBuyOwnPlayerError even with funds, budget < price → InsufficientFunds
    - Cancellation: inactive first, then ownership
    - Valid inputs return None
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from soccer_manager.core.domain_types import (
    UserId, TeamId, PlayerId, TransferId, PlayerPosition, TransferStatus,
)
from soccer_manager.core.entities import Team, Player, Transfer
from soccer_manager.core.enforce_transfer import (
    check_asking_price, check_transfer_active,
    validate_listing, validate_purchase, validate_cancellation,
)
from soccer_manager.core.errors import (
    InvalidAskingPriceError, PlayerNotOwnedError, PlayerAlreadyListedError,
    CannotBuyOwnPlayerError, InsufficientFundsError,
    TransferNotActiveError, TransferNotOwnedError,
)

NOW = datetime.now(timezone.utc)


def _team(budget: int = 5_000_000) -> Team:
    return Team(
        id=TeamId(uuid4()), user_id=UserId(uuid4()), name="Rovers", country="Wales",
        budget=budget, total_value=0, created_at=NOW, updated_at=NOW,
    )


def _player(team: Team) -> Player:
    return Player(
        id=PlayerId(uuid4()), team_id=team.id, first_name="Ian", last_name="Rush",
        country="Wales", age=30, position=PlayerPosition.ATTACKER,
        market_value=1_000_000, created_at=NOW, updated_at=NOW,
    )


def _transfer(
    seller: Team, player: Player, asking_price: int = 3_000_000,
    status: TransferStatus = TransferStatus.ACTIVE,
) -> Transfer:
    return Transfer(
        id=TransferId(uuid4()), player_id=player.id, seller_id=seller.id,
        asking_price=asking_price, status=status, created_at=NOW,
    )


# ─── Asking price ────────────────────────────────────────────────

@pytest.mark.parametrize("price", [0, -1, -5_000_000])
def test_non_positive_asking_price_rejected(price):
    err = check_asking_price(price)
    assert isinstance(err, InvalidAskingPriceError)
    assert err.http_status == 400


def test_minimum_asking_price_accepted():
    assert check_asking_price(1) is None


# ─── Listing ─────────────────────────────────────────────────────

def test_listing_own_unlisted_player_is_valid():
    team = _team()
    assert validate_listing(_player(team), team, None) is None


def test_listing_foreign_player_is_forbidden():
    owner, other = _team(), _team()
    err = validate_listing(_player(owner), other, None)
    assert isinstance(err, PlayerNotOwnedError)
    assert err.http_status == 403


@pytest.mark.parametrize("price", [1, 3_000_000, 10**12])
def test_listing_already_listed_player_conflicts_regardless_of_price(price):
    team = _team()
    player = _player(team)
    err = validate_listing(player, team, _transfer(team, player, asking_price=price))
    assert isinstance(err, PlayerAlreadyListedError)
    assert err.http_status == 409


def test_completed_listing_does_not_block_relisting():
    team = _team()
    player = _player(team)
    done = _transfer(team, player, status=TransferStatus.COMPLETED)
    assert validate_listing(player, team, done) is None


def test_ownership_checked_before_existing_listing():
    owner, other = _team(), _team()
    player = _player(owner)
    err = validate_listing(player, other, _transfer(owner, player))
    assert isinstance(err, PlayerNotOwnedError)


# ─── Purchase ────────────────────────────────────────────────────

def test_purchase_with_enough_budget_is_valid():
    seller, buyer = _team(), _team(budget=3_000_000)
    assert validate_purchase(buyer, _transfer(seller, _player(seller))) is None


def test_buying_own_listing_rejected_even_with_funds():
    team = _team(budget=10**9)
    err = validate_purchase(team, _transfer(team, _player(team)))
    assert isinstance(err, CannotBuyOwnPlayerError)


def test_own_listing_reported_before_insufficient_funds():
    team = _team(budget=0)
    err = validate_purchase(team, _transfer(team, _player(team)))
    assert isinstance(err, CannotBuyOwnPlayerError)


def test_budget_below_price_is_insufficient():
    seller, buyer = _team(), _team(budget=2_999_999)
    err = validate_purchase(buyer, _transfer(seller, _player(seller)))
    assert isinstance(err, InsufficientFundsError)
    assert err.budget == 2_999_999
    assert err.asking_price == 3_000_000


@pytest.mark.parametrize("status", [TransferStatus.COMPLETED, TransferStatus.CANCELLED])
def test_terminal_transfer_is_not_active(status):
    team = _team()
    err = check_transfer_active(_transfer(team, _player(team), status=status))
    assert isinstance(err, TransferNotActiveError)


# ─── Cancellation ────────────────────────────────────────────────

def test_seller_may_cancel_active_listing():
    team = _team()
    assert validate_cancellation(team, _transfer(team, _player(team))) is None


def test_other_team_may_not_cancel():
    seller, other = _team(), _team()
    err = validate_cancellation(other, _transfer(seller, _player(seller)))
    assert isinstance(err, TransferNotOwnedError)


def test_cancel_of_completed_listing_reports_not_active():
    seller, other = _team(), _team()
    transfer = _transfer(seller, _player(seller), status=TransferStatus.COMPLETED)
    assert isinstance(validate_cancellation(other, transfer), TransferNotActiveError)
