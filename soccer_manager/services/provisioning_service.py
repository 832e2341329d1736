"""Team Provisioning — create a new user's team and starting squad.

Invariants:
    - One team per user (TeamAlreadyExistsError on a second attempt)
    - Squad: 3 goalkeepers, 6 defenders, 6 midfielders, 5 attackers at the initial value
    - total_value equals the roster sum from the moment the team exists
    - Team and squad are created in a single commit
"""

import logging
import random

from soccer_manager.core.domain_types import UserId
from soccer_manager.core.entities import TeamSnapshot
from soccer_manager.core.repository_protocols import (
    UnitOfWork, UserRepository, TeamRepository, PlayerRepository,
)
from soccer_manager.core.squad_seed import generate_squad
from soccer_manager.core.valuation import compute_total_value

logger = logging.getLogger(__name__)


class TeamProvisioningService:
    def __init__(
        self,
        db: UnitOfWork,
        users: UserRepository,
        teams: TeamRepository,
        players: PlayerRepository,
        initial_budget: int = 5_000_000,
        initial_player_value: int = 1_000_000,
        rng: random.Random | None = None,
    ):
        self.db = db
        self.users = users
        self.teams = teams
        self.players = players
        self.initial_budget = initial_budget
        self.initial_player_value = initial_player_value
        self.rng = rng or random.Random()

    async def provision_team(self, user_id: UserId, name: str, country: str) -> TeamSnapshot:
        await self.users.get_by_id(user_id)
        try:
            team = await self.teams.create(user_id, name, country, self.initial_budget)
            for seed in generate_squad(self.rng, self.initial_player_value):
                await self.players.create(team.id, seed)
            roster = await self.players.get_by_team_id(team.id)
            await self.teams.update_total_value(team.id, compute_total_value(roster))
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise
        logger.info(
            f"Team provisioned with {len(roster)} players",
            extra={"user_id": user_id, "team_id": team.id},
        )
        return TeamSnapshot(team=await self.teams.get_by_id(team.id), players=roster)
