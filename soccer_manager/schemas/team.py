"""Team Schemas — team provisioning/update requests and the team snapshot view.

Invariants:
    - name 3-50 chars, country 2-50 chars after stripping
    - Update fields are optional; omitted or blank means unchanged
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from soccer_manager.schemas.player import PlayerResponse


def _strip(v: str | None) -> str | None:
    if v is None:
        return None
    return v.strip() or None


class ProvisionTeamRequest(BaseModel):
    name: str = Field(min_length=3, max_length=50)
    country: str = Field(min_length=2, max_length=50)

    @field_validator("name", "country")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("cannot be empty or whitespace")
        return v


class UpdateTeamRequest(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=50)
    country: str | None = Field(None, min_length=2, max_length=50)

    @field_validator("name", "country", mode="before")
    @classmethod
    def strip_blank(cls, v: str | None) -> str | None:
        return _strip(v) if isinstance(v, str) else v


class TeamResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    name: str
    country: str
    budget: int
    total_value: int
    created_at: datetime
    updated_at: datetime


class TeamSnapshotResponse(BaseModel):
    """GET /team payload: team plus roster ordered by position, then name."""
    model_config = ConfigDict(from_attributes=True)

    team: TeamResponse
    players: list[PlayerResponse]
