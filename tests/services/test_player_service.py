"""Player Service — verifies partial player updates.

Tests:
    - Only non-empty fields change
    - Acting user's cached snapshot is invalidated
    - Unknown player → PlayerNotFoundError
"""

from uuid import uuid4

import pytest

from soccer_manager.core.errors import PlayerNotFoundError


async def test_update_player_partial(player_service, cache, make_team):
    seeded = await make_team()
    original = seeded.players[0]

    player = await player_service.update_player(
        seeded.user_id, original.id, first_name="Zico", last_name="", country=None,
    )

    assert player.first_name == "Zico"
    assert player.last_name == original.last_name
    assert player.country == original.country
    assert player.market_value == original.market_value
    assert cache.invalidated == [seeded.user_id]


async def test_update_unknown_player(player_service, make_team):
    seeded = await make_team()
    with pytest.raises(PlayerNotFoundError):
        await player_service.update_player(seeded.user_id, uuid4(), first_name="Ghost")
