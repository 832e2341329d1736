"""Team Valuation — verifies roster sums and appreciation arithmetic.

Tests:
    - compute_total_value sums market values (empty roster = 0)
    - needs_revaluation flags a stale stored total and returns the recomputed one
    - draw_appreciation_percent stays within [10, 100] and honours the seed
    - appreciate floors the increase and stays within [1.10v, 2.00v]
"""

import random
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from soccer_manager.core.domain_types import PlayerId, TeamId, PlayerPosition
from soccer_manager.core.entities import Player
from soccer_manager.core.valuation import (
    MIN_APPRECIATION, MAX_APPRECIATION,
    compute_total_value, needs_revaluation, draw_appreciation_percent, appreciate,
)


def _player(value: int) -> Player:
    now = datetime.now(timezone.utc)
    return Player(
        id=PlayerId(uuid4()), team_id=TeamId(uuid4()),
        first_name="Ana", last_name="Silva", country="Brazil", age=24,
        position=PlayerPosition.DEFENDER, market_value=value,
        created_at=now, updated_at=now,
    )


def test_total_value_sums_roster():
    assert compute_total_value([_player(1_000_000), _player(2_500_000)]) == 3_500_000


def test_total_value_of_empty_roster_is_zero():
    assert compute_total_value([]) == 0


def test_needs_revaluation_detects_stale_total():
    stale, total = needs_revaluation(20_000_000, [_player(1_000_000), _player(1_500_000)])
    assert stale is True
    assert total == 2_500_000


def test_needs_revaluation_accepts_matching_total():
    assert needs_revaluation(1_000_000, [_player(1_000_000)]) == (False, 1_000_000)


def test_appreciation_percent_within_bounds():
    rng = random.Random(7)
    draws = {draw_appreciation_percent(rng) for _ in range(2_000)}
    assert min(draws) >= MIN_APPRECIATION
    assert max(draws) <= MAX_APPRECIATION
    # Both ends reachable
    assert MIN_APPRECIATION in draws and MAX_APPRECIATION in draws


def test_appreciation_percent_reproducible_with_seed():
    a = [draw_appreciation_percent(random.Random(42)) for _ in range(3)]
    b = [draw_appreciation_percent(random.Random(42)) for _ in range(3)]
    assert a == b


@pytest.mark.parametrize("percent,expected", [
    (10, 1_100_000),
    (37, 1_370_000),
    (100, 2_000_000),
])
def test_appreciate_adds_percent(percent, expected):
    assert appreciate(1_000_000, percent) == expected


def test_appreciate_floors_fractional_increase():
    # 999 * 15 / 100 = 149.85
    assert appreciate(999, 15) == 1_148


def test_appreciated_value_within_bounds_for_every_percent():
    value = 1_234_567
    for percent in range(MIN_APPRECIATION, MAX_APPRECIATION + 1):
        new_value = appreciate(value, percent)
        assert value * 110 // 100 <= new_value <= value * 2
        assert new_value > value


@pytest.mark.parametrize("percent", [0, 9, 101])
def test_appreciate_rejects_out_of_range_percent(percent):
    with pytest.raises(ValueError):
        appreciate(1_000_000, percent)
