"""Player Routes — player metadata updates and transfer listing."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from soccer_manager.api.dependencies import (
    get_current_user_id, get_player_service, get_transfer_service,
)
from soccer_manager.core.domain_types import UserId, PlayerId
from soccer_manager.schemas.player import UpdatePlayerRequest, PlayerResponse
from soccer_manager.schemas.transfer import ListPlayerRequest, TransferResponse
from soccer_manager.services.player_service import PlayerService
from soccer_manager.services.transfer_service import TransferService

router = APIRouter(prefix="/api/v1/players", tags=["players"])


@router.patch("/{player_id}", response_model=PlayerResponse)
async def update_player(
    player_id: UUID,
    body: UpdatePlayerRequest,
    user_id: UserId = Depends(get_current_user_id),
    service: PlayerService = Depends(get_player_service),
):
    player = await service.update_player(
        user_id, PlayerId(player_id),
        first_name=body.first_name, last_name=body.last_name, country=body.country,
    )
    return PlayerResponse.model_validate(player)


@router.post(
    "/{player_id}/transfer", response_model=TransferResponse,
    status_code=status.HTTP_201_CREATED,
)
async def list_player(
    player_id: UUID,
    body: ListPlayerRequest,
    user_id: UserId = Depends(get_current_user_id),
    service: TransferService = Depends(get_transfer_service),
):
    """Put a player from the acting user's team on the transfer market."""
    transfer = await service.list_player(user_id, PlayerId(player_id), body.asking_price)
    return TransferResponse.model_validate(transfer)
