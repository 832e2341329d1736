"""Transfer Routes — market listing, purchase, and cancellation."""

from uuid import UUID

from fastapi import APIRouter, Depends

from soccer_manager.api.dependencies import get_current_user_id, get_transfer_service
from soccer_manager.core.domain_types import UserId, TransferId
from soccer_manager.schemas.transfer import (
    TransferListingResponse, TransferResponse, PurchaseResponse,
)
from soccer_manager.services.transfer_service import TransferService

router = APIRouter(prefix="/api/v1/transfers", tags=["transfers"])


@router.get("", response_model=list[TransferListingResponse])
async def get_transfer_list(
    user_id: UserId = Depends(get_current_user_id),
    service: TransferService = Depends(get_transfer_service),
):
    listings = await service.get_transfer_list()
    return [TransferListingResponse.model_validate(item) for item in listings]


@router.post("/{transfer_id}/buy", response_model=PurchaseResponse)
async def buy_player(
    transfer_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    service: TransferService = Depends(get_transfer_service),
):
    result = await service.buy_player(user_id, TransferId(transfer_id))
    return PurchaseResponse.model_validate(result)


@router.delete("/{transfer_id}", response_model=TransferResponse)
async def cancel_listing(
    transfer_id: UUID,
    user_id: UserId = Depends(get_current_user_id),
    service: TransferService = Depends(get_transfer_service),
):
    transfer = await service.cancel_listing(user_id, TransferId(transfer_id))
    return TransferResponse.model_validate(transfer)
