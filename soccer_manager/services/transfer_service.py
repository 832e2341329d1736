"""Transfer Service — listing, market query, purchase, and cancellation workflows.

Invariants:
    - At most one active transfer per player (checked here, enforced by a partial unique index)
    - A purchase moves exactly asking_price from buyer to seller: total budget is conserved
    - Purchase writes (reassign, revalue, debit, credit, complete) share one transaction;
      any failure rolls all of them back
    - Completion is conditional on status = active: of two racing buyers exactly one commits,
      the other rolls back with TransferNotActiveError
    - Cache invalidation happens only after commit and never fails the workflow
    - A committed purchase is never reported as failed: if re-reading fails the
      computed outcome is returned
    - A listing that fails to resolve is dropped and the read transaction rolled back,
      so later listings resolve on a clean transaction

Design Decisions:
    - Rules live in core/enforce_transfer.py as pure functions; this module sequences IO
    - Pre-checks on loaded rows give precise errors; conditional UPDATEs close the race window
    - RNG injected so appreciation is reproducible under a seeded random.Random
"""

import dataclasses
import logging
import random
from datetime import datetime, timezone

from soccer_manager.core.domain_types import UserId, PlayerId, TransferId, TransferStatus
from soccer_manager.core.entities import Transfer, TransferListing, PurchaseResult
from soccer_manager.core.enforce_transfer import (
    check_asking_price, check_transfer_active,
    validate_listing, validate_purchase, validate_cancellation,
)
from soccer_manager.core.errors import (
    SoccerManagerError, InsufficientFundsError, TransferNotActiveError,
)
from soccer_manager.core.repository_protocols import (
    UnitOfWork, TeamRepository, PlayerRepository, TransferRepository, TeamCache,
)
from soccer_manager.core.valuation import appreciate, draw_appreciation_percent
from soccer_manager.services.cache_guard import invalidate_snapshot

logger = logging.getLogger(__name__)


class TransferService:
    def __init__(
        self,
        db: UnitOfWork,
        teams: TeamRepository,
        players: PlayerRepository,
        transfers: TransferRepository,
        cache: TeamCache | None = None,
        rng: random.Random | None = None,
    ):
        self.db = db
        self.teams = teams
        self.players = players
        self.transfers = transfers
        self.cache = cache
        self.rng = rng or random.Random()

    # ─── Listing ─────────────────────────────────────────────────

    async def list_player(
        self, user_id: UserId, player_id: PlayerId, asking_price: int,
    ) -> Transfer:
        """Put one of the acting user's players on the market."""
        if err := check_asking_price(asking_price):
            raise err
        player = await self.players.get_by_id(player_id)
        team = await self.teams.get_by_user_id(user_id)
        existing = await self.transfers.get_active_by_player_id(player.id)
        if err := validate_listing(player, team, existing):
            logger.warning(
                f"Listing rejected: {err.code}",
                extra={"user_id": user_id, "player_id": player_id, "error_code": err.code},
            )
            raise err

        try:
            transfer = await self.transfers.create(player.id, team.id, asking_price)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise
        logger.info(
            "Player listed for transfer",
            extra={
                "team_id": team.id, "player_id": player.id,
                "transfer_id": transfer.id, "asking_price": asking_price,
            },
        )
        return transfer

    # ─── Market Query ────────────────────────────────────────────

    async def get_transfer_list(self) -> list[TransferListing]:
        """Active listings, newest first. Unresolvable listings are skipped."""
        listings = []
        for transfer in await self.transfers.get_active():
            try:
                player = await self.players.get_by_id(transfer.player_id)
                seller = await self.teams.get_by_id(transfer.seller_id)
            except SoccerManagerError as e:
                await self.db.rollback()
                logger.warning(
                    f"Dropping unresolvable listing: {e.message}",
                    extra={"transfer_id": transfer.id, "error_code": e.code},
                )
                continue
            listings.append(TransferListing(transfer=transfer, player=player, seller_team=seller))
        return listings

    # ─── Purchase ────────────────────────────────────────────────

    async def buy_player(self, user_id: UserId, transfer_id: TransferId) -> PurchaseResult:
        logger.info("Purchase started", extra={"user_id": user_id, "transfer_id": transfer_id})
        transfer = await self.transfers.get_by_id(transfer_id)
        if err := check_transfer_active(transfer):
            raise err
        buyer = await self.teams.get_by_user_id(user_id)
        seller = await self.teams.get_by_id(transfer.seller_id)
        if err := validate_purchase(buyer, transfer):
            logger.warning(
                f"Purchase rejected: {err.code}",
                extra={"team_id": buyer.id, "transfer_id": transfer.id, "error_code": err.code},
            )
            raise err

        player = await self.players.get_by_id(transfer.player_id)
        percent = draw_appreciation_percent(self.rng)
        new_value = appreciate(player.market_value, percent)
        price = transfer.asking_price
        completed_at = datetime.now(timezone.utc)

        try:
            await self.players.transfer_player(player.id, buyer.id)
            await self.players.update_market_value(player.id, new_value)
            if not await self.teams.debit_budget(buyer.id, price):
                raise InsufficientFundsError(buyer.budget, price)
            await self.teams.credit_budget(seller.id, price)
            if not await self.transfers.complete(transfer.id, buyer.id, completed_at):
                raise TransferNotActiveError(transfer.id)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise

        logger.info(
            f"Purchase completed: value {player.market_value} -> {new_value} (+{percent}%)",
            extra={
                "user_id": user_id, "team_id": buyer.id,
                "player_id": player.id, "transfer_id": transfer.id,
            },
        )
        await invalidate_snapshot(self.cache, user_id)
        await invalidate_snapshot(self.cache, seller.user_id)

        committed = PurchaseResult(
            transfer=dataclasses.replace(
                transfer, status=TransferStatus.COMPLETED,
                buyer_id=buyer.id, completed_at=completed_at,
            ),
            player=dataclasses.replace(player, team_id=buyer.id, market_value=new_value),
            buyer_team=dataclasses.replace(buyer, budget=buyer.budget - price),
            seller_team=dataclasses.replace(seller, budget=seller.budget + price),
            appreciation_percent=percent,
        )
        return await self._reload_purchase(committed)

    async def _reload_purchase(self, committed: PurchaseResult) -> PurchaseResult:
        """Fresh rows for a committed purchase; the computed outcome if a read fails."""
        try:
            return PurchaseResult(
                transfer=await self.transfers.get_by_id(committed.transfer.id),
                player=await self.players.get_by_id(committed.player.id),
                buyer_team=await self.teams.get_by_id(committed.buyer_team.id),
                seller_team=await self.teams.get_by_id(committed.seller_team.id),
                appreciation_percent=committed.appreciation_percent,
            )
        except SoccerManagerError as e:
            logger.warning(
                f"Purchase committed but reload failed, returning computed outcome: {e.message}",
                extra={"transfer_id": committed.transfer.id, "error_code": e.code},
            )
            return committed

    # ─── Cancellation ────────────────────────────────────────────

    async def cancel_listing(self, user_id: UserId, transfer_id: TransferId) -> Transfer:
        """Withdraw an active listing owned by the acting user's team."""
        transfer = await self.transfers.get_by_id(transfer_id)
        team = await self.teams.get_by_user_id(user_id)
        if err := validate_cancellation(team, transfer):
            raise err
        try:
            if not await self.transfers.cancel(transfer.id):
                raise TransferNotActiveError(transfer.id)
            await self.db.commit()
        except BaseException:
            await self.db.rollback()
            raise
        logger.info("Listing cancelled", extra={"team_id": team.id, "transfer_id": transfer.id})
        return await self.transfers.get_by_id(transfer.id)
