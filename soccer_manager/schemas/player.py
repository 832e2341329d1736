"""Player Schemas — player update requests and player views.

Invariants:
    - Update fields are optional; blank strings are treated as "leave unchanged"
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soccer_manager.core.domain_types import PlayerPosition


class UpdatePlayerRequest(BaseModel):
    first_name: str | None = Field(None, max_length=50)
    last_name: str | None = Field(None, max_length=50)
    country: str | None = Field(None, max_length=50)

    @field_validator("first_name", "last_name", "country")
    @classmethod
    def strip_blank(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    team_id: UUID
    first_name: str
    last_name: str
    country: str
    age: int
    position: PlayerPosition
    market_value: int
    created_at: datetime
    updated_at: datetime
