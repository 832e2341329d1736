"""Transfer Schemas — listing requests, market rows, and purchase outcomes.

Invariants:
    - asking_price is a whole amount >= 1
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from soccer_manager.core.domain_types import TransferStatus
from soccer_manager.schemas.player import PlayerResponse
from soccer_manager.schemas.team import TeamResponse


class ListPlayerRequest(BaseModel):
    asking_price: int = Field(ge=1)


class TransferResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    player_id: UUID
    seller_id: UUID
    buyer_id: UUID | None = None
    asking_price: int
    status: TransferStatus
    created_at: datetime
    completed_at: datetime | None = None


class TransferListingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transfer: TransferResponse
    player: PlayerResponse
    seller_team: TeamResponse


class PurchaseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    transfer: TransferResponse
    player: PlayerResponse
    buyer_team: TeamResponse
    seller_team: TeamResponse
    appreciation_percent: int
