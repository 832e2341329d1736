"""Team Valuation — pure market value arithmetic.

Invariants:
    - Team total value is the sum of market values over the current roster
    - Appreciation percent is drawn uniformly from [MIN_APPRECIATION, MAX_APPRECIATION]
    - appreciate() never decreases a value; integer division floors the increase
    - RNG is always passed in, never module-global

Design Decisions:
    - random.Random parameter: seeded instances make purchase outcomes reproducible in tests
"""

import random
from collections.abc import Iterable

from soccer_manager.core.domain_types import Money, AppreciationPercent
from soccer_manager.core.entities import Player

MIN_APPRECIATION = 10
MAX_APPRECIATION = 100


def compute_total_value(players: Iterable[Player]) -> Money:
    """Authoritative team value: sum of roster market values."""
    return Money(sum(p.market_value for p in players))


def needs_revaluation(stored_total: int, players: Iterable[Player]) -> tuple[bool, int]:
    """Return (stale, recomputed_total) for a stored team total."""
    recomputed = compute_total_value(players)
    return recomputed != stored_total, recomputed


def draw_appreciation_percent(rng: random.Random) -> AppreciationPercent:
    """Uniform integer in [10, 100] inclusive."""
    return AppreciationPercent(rng.randint(MIN_APPRECIATION, MAX_APPRECIATION))


def appreciate(market_value: int, percent: int) -> Money:
    """market_value + floor(market_value * percent / 100)."""
    if not MIN_APPRECIATION <= percent <= MAX_APPRECIATION:
        raise ValueError(
            f"appreciation percent must be in "
            f"[{MIN_APPRECIATION}, {MAX_APPRECIATION}], got {percent}"
        )
    return Money(market_value + (market_value * percent) // 100)
