"""Initial Squad — pure generation of the roster a new team starts with.

Invariants:
    - SQUAD_COMPOSITION totals 20 players across the four positions
    - Every seeded player starts at the same nominal market value
    - Ages drawn from [MIN_AGE, MAX_AGE] inclusive
    - RNG is always passed in, never module-global
"""

import random
from dataclasses import dataclass

from soccer_manager.core.domain_types import PlayerPosition

SQUAD_COMPOSITION: tuple[tuple[PlayerPosition, int], ...] = (
    (PlayerPosition.GOALKEEPER, 3),
    (PlayerPosition.DEFENDER, 6),
    (PlayerPosition.MIDFIELDER, 6),
    (PlayerPosition.ATTACKER, 5),
)
SQUAD_SIZE = sum(count for _, count in SQUAD_COMPOSITION)

MIN_AGE = 18
MAX_AGE = 40

FIRST_NAMES = (
    "Oliver", "Jack", "Harry", "George", "Noah",
    "Charlie", "Leo", "Oscar", "Jacob", "Liam",
)
LAST_NAMES = (
    "Smith", "Johnson", "Williams", "Brown", "Jones",
    "Garcia", "Miller", "Davis", "Martinez", "Hernandez",
)
COUNTRIES = (
    "England", "Spain", "Germany", "France", "Italy",
    "Brazil", "Argentina", "Portugal", "Netherlands", "Belgium",
)


@dataclass(frozen=True)
class PlayerSeed:
    """Attributes for one player to be created with a new team."""
    first_name: str
    last_name: str
    country: str
    age: int
    position: PlayerPosition
    market_value: int


def generate_squad(rng: random.Random, market_value: int) -> list[PlayerSeed]:
    """Build the starting roster in SQUAD_COMPOSITION order."""
    return [
        PlayerSeed(
            first_name=rng.choice(FIRST_NAMES),
            last_name=rng.choice(LAST_NAMES),
            country=rng.choice(COUNTRIES),
            age=rng.randint(MIN_AGE, MAX_AGE),
            position=position,
            market_value=market_value,
        )
        for position, count in SQUAD_COMPOSITION
        for _ in range(count)
    ]
